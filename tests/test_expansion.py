import pytest

from minish.environment import Environment
from minish.expansion import (
    expand_heredoc_line,
    expand_quoted,
    expand_variables,
    expand_wildcards,
    is_heredoc_delimiter,
    match_pattern,
    matching_files,
)
from minish.lexer import generate_tokens
from minish.tokens import Token, TokenType

USER = "alice"


@pytest.fixture
def env():
    return Environment([f"USER={USER}", "HOME=/home/user"])


def _values(tokens):
    return [token.value for token in tokens]


def test_is_heredoc_delimiter_true():
    tokens = generate_tokens("cat << $EOF")
    index = next(i for i, t in enumerate(tokens) if t.type is TokenType.VARIABLE)
    assert is_heredoc_delimiter(tokens, index) is True


def test_is_heredoc_delimiter_false():
    tokens = generate_tokens("echo $EOF")
    index = next(i for i, t in enumerate(tokens) if t.type is TokenType.VARIABLE)
    assert is_heredoc_delimiter(tokens, index) is False


def test_expand_variable_to_word(env):
    result = expand_variables(generate_tokens("echo $USER"), env, 0)
    assert _values(result) == ["echo", " ", USER]
    assert result[-1].type is TokenType.WORD


def test_missing_variable_is_dropped(env):
    result = expand_variables(generate_tokens("echo $NOPE x"), env, 0)
    assert _values(result) == ["echo", " ", " ", "x"]
    assert all(token.type is not TokenType.VARIABLE for token in result)


def test_exit_status_variable(env):
    result = expand_variables(generate_tokens("echo $?"), env, 42)
    assert result[-1] == Token(TokenType.WORD, str(42))


def test_heredoc_delimiter_not_expanded(env):
    tokens = generate_tokens("cat << $USER")
    assert expand_variables(tokens, env, 0) == tokens


def test_double_quoted_expanded_single_untouched(env):
    tokens = generate_tokens("echo \"$USER\" '$USER'")
    result = expand_variables(tokens, env, 0)
    assert result[2] == Token(TokenType.STR_DOUBLE_Q, USER)
    assert result[4] == Token(TokenType.STR_SINGLE_Q, "$USER")


def test_input_tokens_not_mutated(env):
    tokens = generate_tokens("echo $USER $NOPE")
    snapshot = [Token(t.type, t.value) for t in tokens]
    expand_variables(tokens, env, 0)
    assert tokens == snapshot


def test_expand_quoted_variables(env):
    assert expand_quoted("hi $USER!", env, 0) == "hi " + USER + "!"


def test_expand_quoted_keeps_non_names(env):
    for text in ["$", "cost $5", "a $ b", "$-x"]:
        assert expand_quoted(text, env, 0) == text


def test_expand_quoted_exit_status(env):
    assert expand_quoted("$?x", env, 7) == str(7) + "x"


def test_expand_quoted_unset_is_empty(env):
    assert expand_quoted("[$NOPE]", env, 0) == "[]"


@pytest.mark.parametrize(
    "pattern, name, expected",
    [
        ("*.c", "main.c", True),
        ("*", "", True),
        ("a*b", "ab", True),
        ("a*b", "acccb", True),
        ("a*b", "abc", False),
        ("abc", "abc", True),
        ("", "x", False),
        ("*.c", "main.h", False),
        ("*a*", "banana", True),
    ],
)
def test_match_pattern(pattern, name, expected):
    assert match_pattern(pattern, name) is expected


@pytest.fixture
def files(tmp_path):
    for name in ["a.c", "b.c", "c.h", ".hidden.c"]:
        (tmp_path / name).write_text("")
    return tmp_path


def test_matching_files_skips_hidden(files):
    assert sorted(matching_files("*.c", files)) == ["a.c", "b.c"]


def test_matching_files_missing_directory(tmp_path):
    assert matching_files("*", tmp_path / "missing") == []


def test_expand_wildcards_replaces_word(files):
    result = expand_wildcards(generate_tokens("ls *.c"), files)
    words = [t.value for t in result if t.type is TokenType.WORD]
    assert words[0] == "ls"
    assert sorted(words[1:]) == ["a.c", "b.c"]
    assert result[-2] == Token(TokenType.SPACE, " ")


def test_expand_wildcards_no_match_keeps_token(files):
    tokens = generate_tokens("ls *.xyz")
    assert expand_wildcards(tokens, files) == tokens


def test_expand_wildcards_next_to_quote_is_literal(files):
    tokens = generate_tokens('ls "x"*.c')
    assert expand_wildcards(tokens, files) == tokens


def test_expand_wildcards_empty_quote_does_not_block(files):
    result = expand_wildcards(generate_tokens("ls ''*.c"), files)
    words = [t.value for t in result if t.type is TokenType.WORD]
    assert words[0] == "ls"
    assert sorted(words[1:]) == ["a.c", "b.c"]


def test_heredoc_line_expands(env):
    assert expand_heredoc_line("$HOME/x", env, 0) == "/home/user/x"


def test_heredoc_line_exit_status(env):
    assert expand_heredoc_line("code $?", env, 3) == "code " + str(3)


def test_heredoc_line_unset_and_bare_dollar_vanish(env):
    assert expand_heredoc_line("$", env, 0) == ""
    assert expand_heredoc_line("[$NOPE]", env, 0) == "[]"
    assert expand_heredoc_line("a$ b", env, 0) == "a b"


def test_heredoc_line_without_dollar_unchanged(env):
    line = "plain text"
    assert expand_heredoc_line(line, env, 0) == line