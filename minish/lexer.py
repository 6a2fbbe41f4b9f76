"""Split a command line into tokens and check its basic syntax."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from .tokens import REDIRECTIONS, SYNTAX_ERROR_PREFIX, Token, TokenType

_WHITESPACE = " \t\n\v\f\r"
_METACHARS = ";|$<>'\"()&"

_RULES: list[tuple[re.Pattern[str], TokenType]] = [
    (re.compile(r"\|\|"), TokenType.OR),
    (re.compile(r"\|"), TokenType.PIPE),
    (re.compile(r"&&"), TokenType.AND),
    (re.compile(r"&"), TokenType.WORD),
    (re.compile(r"\("), TokenType.PAREN_OPEN),
    (re.compile(r"\)"), TokenType.PAREN_CLOSE),
    (re.compile(r">>"), TokenType.APPEND),
    (re.compile(r"<<"), TokenType.HEREDOC),
    (re.compile(r">"), TokenType.REDIR_OUT),
    (re.compile(r"<"), TokenType.REDIR_IN),
    (re.compile(r";"), TokenType.SEMICOLON),
    (re.compile(r"\$\?"), TokenType.VARIABLE),
    (re.compile(r"\$[A-Za-z_][A-Za-z0-9_]*"), TokenType.VARIABLE),
    (re.compile(r"\$"), TokenType.WORD),
    (re.compile(f"[{re.escape(_WHITESPACE)}]+"), TokenType.SPACE),
    (re.compile(f"[^{re.escape(_WHITESPACE + _METACHARS)}]+"), TokenType.WORD),
]

_QUOTES = {"'": ("single", TokenType.STR_SINGLE_Q), '"': ("double", TokenType.STR_DOUBLE_Q)}


class LexerError(ValueError):
    """Raised when a command line cannot be tokenised or is malformed."""


def _scan(text: str) -> Iterator[Token]:
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char in _QUOTES:
            name, token_type = _QUOTES[char]
            end = text.find(char, pos + 1)
            if end == -1:
                raise LexerError(f"unclosed {name} quote")
            yield Token(token_type, text[pos + 1 : end])
            pos = end + 1
            continue
        for pattern, token_type in _RULES:
            match = pattern.match(text, pos)
            if match:
                yield Token(token_type, match.group())
                pos = match.end()
                break
        else:  # pragma: no cover - the word rule accepts every remaining char
            raise LexerError(f"unexpected character {char!r}")


def _unbalanced_paren(tokens: Iterable[Token]) -> str | None:
    balance = 0
    for token in tokens:
        if token.type is TokenType.PAREN_OPEN:
            balance += 1
        elif token.type is TokenType.PAREN_CLOSE:
            balance -= 1
            if balance < 0:
                return ")"
    return "(" if balance else None


def _significant(tokens: Iterable[Token]) -> list[Token]:
    return [token for token in tokens if token.type is not TokenType.SPACE]


def _leading_operator(tokens: Iterable[Token]) -> Token | None:
    significant = _significant(tokens)
    if significant and significant[0].is_operator():
        return significant[0]
    return None


def valid_parentheses(tokens: Iterable[Token]) -> bool:
    """Return True if every parenthesis is matched and none closes early."""
    return _unbalanced_paren(tokens) is None


def bad_operator(tokens: Iterable[Token]) -> bool:
    """Return True if the first non-space token is a control operator."""
    return _leading_operator(tokens) is not None


def incomplete_command_line(tokens: Iterable[Token]) -> bool:
    """Return True if the line ends with ``&&``, ``||`` or ``|`` awaiting more input."""
    significant = _significant(tokens)
    if len(significant) < 2:
        return False
    prev, last = significant[-2], significant[-1]
    return (
        last.type in (TokenType.AND, TokenType.OR, TokenType.PIPE)
        and prev.type not in REDIRECTIONS
    )


def generate_tokens(text: str) -> list[Token]:
    """Tokenise ``text``, raising LexerError on quoting or syntax problems."""
    tokens = list(_scan(text))
    paren = _unbalanced_paren(tokens)
    if paren is not None:
        raise LexerError(f"{SYNTAX_ERROR_PREFIX}'{paren}'")
    operator = _leading_operator(tokens)
    if operator is not None:
        raise LexerError(SYNTAX_ERROR_PREFIX + operator.value)
    return tokens