# minish

`minish` holds the front-end stages of a small POSIX-style shell as a
Python library: turning a command line into tokens, keeping the table of
shell variables, expanding variables and wildcards, and the syntax-tree
types that describe a parsed command line. Each stage can be used on its
own.

## Modules

- **`minish.tokens`**: `TokenType` lists the token kinds: words, single-
  and double-quoted strings, variables, whitespace, `|`, `&&`, `||`, `;`,
  `(`, `)` and the redirections `<`, `>`, `>>` and `<<`. A `Token` is a
  dataclass with a `type` and a `value`. `Token.is_operator()` is true for
  `&&`, `||`, `|` and `;`.
- **`minish.lexer`**: `generate_tokens(text)` returns the list of tokens
  for a line. Quoted strings become one token holding the text between
  the quotes. `$NAME` and `$?` become variable tokens. A lone `$` or `&`
  is kept as a word. It raises `LexerError` (a `ValueError`) for an
  unclosed quote, unbalanced parentheses, or a line whose first token is
  an operator. The checks are also available alone:
  `valid_parentheses`, `bad_operator`, and `incomplete_command_line`. The
  last one reports whether a line ends with `|`, `&&` or `||` after
  something other than a redirection, and so needs more input.
- **`minish.environment`**: `Environment` is an ordered list of
  `NAME=value` entries. It has `get` (empty string when unset), `lookup`
  (None when unset), `index_of`, `set` (replaces an entry in place or
  appends a new one), `unset`, iteration and `len`. The helpers are
  `is_valid_identifier` (checks the name before any `=`), `is_integer`
  (a non-empty run of digits) and `split_assignment` (splits at the
  first `=` and raises `ValueError` if there is none).
- **`minish.expansion`**:
  - `expand_variables(tokens, env, exit_status)` replaces variable tokens
    with word tokens. Variables that expand to nothing are dropped. It
    expands `$NAME` and `$?` inside double-quoted strings. It leaves the
    delimiter after `<<` as written, which `is_heredoc_delimiter` detects.
  - `expand_quoted` does the double-quote expansion on a plain string.
  - `expand_wildcards(tokens, directory)` replaces an unquoted word that
    contains `*` with the non-hidden names in `directory` that match it.
    The names are separated by space tokens. If nothing matches, the word
    is left as it is. A word next to a non-empty quoted string is not
    expanded.
  - `match_pattern` and `matching_files` are the matching steps on their
    own.
  - `expand_heredoc_line` expands variables in one line of a
    here-document body. Every `$` starts a variable, and unset variables
    vanish.
- **`minish.ast`**: `NodeType`, `Redirect`, `Command` and `AstNode`
  describe commands, pipes, `&&`, `||`, `;` sequences and parenthesised
  groups with their own redirections. Nodes are built with
  `AstNode.command`, `AstNode.binary` and `AstNode.group`. `Redirect`
  rejects token types that are not redirections. `AstNode.binary`
  rejects node types that are not binary.

## Example

```python
from minish.lexer import generate_tokens, LexerError
from minish.environment import Environment
from minish.expansion import expand_variables, expand_quoted

env = Environment(["USER=alice", "HOME=/home/alice"])

tokens = generate_tokens('echo "hello $USER" | wc -c')
for token in expand_variables(tokens, env, 0):
    print(token.type, repr(token.value))

print(env.get("HOME"))                                 # /home/alice
print(expand_quoted("home is $HOME, status $?", env, 0))
# home is /home/alice, status 0

try:
    generate_tokens("echo 'unterminated")
except LexerError as err:
    print(err)                                         # unclosed single quote
```

## What this package does not do

`minish` does not run anything. It has no parser that builds an `AstNode`
tree from tokens; callers build trees themselves with the `minish.ast`
constructors. It has no executor, no builtin commands, no redirection or
pipe handling, no signal handling, and no interactive prompt or
command-line program. It stops at tokens, expanded tokens and tree types.