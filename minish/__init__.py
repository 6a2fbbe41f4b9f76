"""Shell front-end stages: tokens, lexer, variable table, expansion and syntax-tree types."""

__version__ = "0.1.0"

__all__ = ["ast", "environment", "expansion", "lexer", "tokens"]