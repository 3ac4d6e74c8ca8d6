# pytoylex

pytoylex reads a source file written in a small Python-like language, splits
each line into tokens, recognises a fixed set of statement patterns and builds
a simple syntax tree from them. Everything it finds is printed as it goes, so
it is handy for watching how a lexer and a parser see a program.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pytoylex [FILE]
```

`FILE` defaults to `test.py` in the current directory. For every line the
command prints:

- the line itself (`-> Line N: ...`),
- each token with its type (`Token: a, Type: TOKEN_IDENTIFIER`), or
  `Error: unknown token in line N: ...` for text it cannot classify (that
  token is then dropped),
- the parser's report for that line, framed by `-- Parsing line N --` and
  `-- End of parsing line N --`.

Lines longer than 255 characters are cut into pieces of at most 255
characters, and each piece is numbered and processed as a line of its own.

When the whole file has been read, the collected syntax tree is printed, one
node per line. Statements are linked one after another, and every node is
printed two spaces deeper than the node before it, so an input such as

```
a = 5
if a > 3:
    print("big")
```

ends with

```
Assignment: a = 5
  If: a > 3
    Print: "big"
```

Exit status is 0 on success. If the file cannot be opened, the command prints
`Error opening file` and exits with status 1. A token of 100 characters or more,
or more than 100 tokens on one line, stops the run with an `Error: ...` message
on standard error and status 1.

### What is recognised

Tokens: identifiers, numbers, double-quoted strings, `+ - * / //`, `=`,
`> < == != >= <=`, `and or not`, `print`, `if elif else while`, and
`, : ( ) [ ]`. The characters `( ) : ,` split tokens on their own; everything
else is separated by whitespace. Text after `#` is a comment.

Statements: assignments (`a = 5`, `a = b + 1`), `if` with one comparison or two
joined by `and`, `elif`, `else:`, `while` with a comparison, `print(...)` with
one to three arguments, single-argument calls such as `add(a)`, and bare
arithmetic, comparison and logical expressions. Anything else is reported as
`Syntax error or unrecognized statement at token N: ...` and skipped one token
at a time.

## Using it from Python

```python
import sys

from pytoylex.lexer import split_line, identify_token, tokenize_line
from pytoylex.parser import Parser
from pytoylex.syntax_tree import format_ast, print_ast
from pytoylex.cli import run

identify_token("while").type          # TokenType.WHILE
list(split_line('print("hi", x)'))    # ['print', '(', '"hi"', ',', 'x', ')']

parser = Parser(sys.stdout)
parser.parse_tokens(tokenize_line("a = a + 1", 1, sys.stdout), 1)
for node in parser.nodes():
    print(node.describe())            # Arithmetic: a + 1

print(format_ast(parser.root))
```

- `pytoylex.lexer`: `TokenType`, `Token`, `identify_token(text)`,
  `split_line(line)` (a generator of raw token texts) and
  `tokenize_line(line, line_number, out)`, which reports each token to `out`
  and returns the list of recognised tokens.
- `pytoylex.parser`: `Parser`, whose `parse_tokens(tokens, line_number)`
  returns the nodes created for that line and whose `nodes()` returns every
  top-level node so far; also the predicates `is_id_or_num`,
  `is_arithmetic_op`, `is_comparison_op` and `is_logical_op`.
- `pytoylex.syntax_tree`: `NodeType`, `AstNode` (with `describe()` and
  `chain()`), `format_ast(root, indent)` and `print_ast(root, indent, out)`.
- `pytoylex.cli`: `run(path, out)` does what the command does, writes to
  `out` and returns the root node; `main(argv)` is the command itself.

Everywhere an `out` stream is taken, leaving it out writes to standard output.

## What it does not do

pytoylex only recognises and reports; it does not run programs or evaluate
expressions. Each line is parsed on its own, indentation is ignored, and the
tree does not group statements into blocks: every recognised statement is
simply linked after the previous one.