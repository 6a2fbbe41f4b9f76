"""Variable, quoted-string, wildcard and here-document expansion."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence

from .environment import Environment
from .tokens import Token, TokenType

_QUOTED_VAR = re.compile(r"\$(\?|[A-Za-z_][A-Za-z0-9_]*)")
_HEREDOC_VAR = re.compile(r"\$(\?|[A-Za-z0-9_]*)")
_QUOTED_TYPES = (TokenType.STR_DOUBLE_Q, TokenType.STR_SINGLE_Q)


def is_heredoc_delimiter(tokens: Sequence[Token], index: int) -> bool:
    """Return True if the nearest non-space token before ``index`` is ``<<``."""
    for token in reversed(tokens[:index]):
        if token.type is not TokenType.SPACE:
            return token.type is TokenType.HEREDOC
    return False


def expand_quoted(text: str, env: Environment, exit_status: int) -> str:
    """Expand ``$NAME`` and ``$?`` inside the text of a double-quoted string."""

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name == "?":
            return str(exit_status)
        return env.get(name)

    return _QUOTED_VAR.sub(replace, text)


def expand_variables(
    tokens: Sequence[Token], env: Environment, exit_status: int
) -> list[Token]:
    """Return the tokens with variables and double-quoted strings expanded.

    Variables that expand to nothing are dropped; here-document delimiters
    are left as written.
    """
    result = list(tokens)
    index = 0
    while index < len(result):
        token = result[index]
        if token.type is TokenType.VARIABLE and not is_heredoc_delimiter(result, index):
            if token.value[1:2] == "?":
                result[index] = Token(TokenType.WORD, str(exit_status))
            else:
                value = env.get(token.value[1:])
                if not value:
                    del result[index]
                    continue
                result[index] = Token(TokenType.WORD, value)
        elif (
            token.type is TokenType.STR_DOUBLE_Q
            and "$" in token.value
            and not is_heredoc_delimiter(result, index)
        ):
            result[index] = Token(
                TokenType.STR_DOUBLE_Q, expand_quoted(token.value, env, exit_status)
            )
        index += 1
    return result


def match_pattern(pattern: str, filename: str) -> bool:
    """Return True if ``filename`` matches ``pattern``, where ``*`` matches any run."""
    regex = "".join(".*" if char == "*" else re.escape(char) for char in pattern)
    return re.fullmatch(regex, filename, re.DOTALL) is not None


def matching_files(pattern: str, directory: str | os.PathLike[str] = ".") -> list[str]:
    """Return the non-hidden names in ``directory`` that match ``pattern``."""
    try:
        names = os.listdir(directory)
    except OSError:
        return []
    return [
        name for name in names if not name.startswith(".") and match_pattern(pattern, name)
    ]


def _is_nonempty_quoted(token: Token | None) -> bool:
    return token is not None and token.type in _QUOTED_TYPES and bool(token.value)


def expand_wildcards(
    tokens: Sequence[Token], directory: str | os.PathLike[str] = "."
) -> list[Token]:
    """Replace unquoted words containing ``*`` with the files they match."""
    result: list[Token] = []
    for index, token in enumerate(tokens):
        prev = result[-1] if result else None
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        qualifies = (
            token.type is TokenType.WORD
            and "*" in token.value
            and not _is_nonempty_quoted(prev)
            and not _is_nonempty_quoted(following)
        )
        matches = matching_files(token.value, directory) if qualifies else []
        if not matches:
            result.append(token)
            continue
        for position, name in enumerate(matches):
            if position:
                result.append(Token(TokenType.SPACE, " "))
            result.append(Token(TokenType.WORD, name))
    return result


def expand_heredoc_line(line: str, env: Environment, exit_status: int) -> str:
    """Expand variables in one line of a here-document body.

    Every ``$`` starts a variable; unset variables and bare ``$`` vanish.
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name == "?":
            return str(exit_status)
        value = env.lookup(name)
        return "" if value is None else value

    return _HEREDOC_VAR.sub(replace, line)