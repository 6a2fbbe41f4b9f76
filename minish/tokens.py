"""Token types and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

SYNTAX_ERROR_PREFIX = "syntax error near unexpected token "


class TokenType(Enum):
    """Kinds of lexical tokens recognised on a command line."""

    SEMICOLON = auto()
    PAREN_OPEN = auto()
    PAREN_CLOSE = auto()
    AND = auto()
    OR = auto()
    PIPE = auto()
    WORD = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    APPEND = auto()
    HEREDOC = auto()
    VARIABLE = auto()
    STR_DOUBLE_Q = auto()
    STR_SINGLE_Q = auto()
    SPACE = auto()


CONTROL_OPERATORS = frozenset(
    {TokenType.AND, TokenType.OR, TokenType.PIPE, TokenType.SEMICOLON}
)

REDIRECTIONS = frozenset(
    {TokenType.REDIR_IN, TokenType.REDIR_OUT, TokenType.APPEND, TokenType.HEREDOC}
)


@dataclass
class Token:
    """A single lexical token: its kind and the text it stands for."""

    type: TokenType
    value: str

    def is_operator(self) -> bool:
        """Return True for the control operators ``&&``, ``||``, ``|`` and ``;``."""
        return self.type in CONTROL_OPERATORS