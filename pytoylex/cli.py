"""Command that tokenizes and parses a source file and prints its syntax tree."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, Sequence, TextIO

from .lexer import tokenize_line
from .parser import Parser
from .syntax_tree import AstNode, print_ast

LINE_LIMIT = 255
DEFAULT_PATH = "test.py"


def _read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines, splitting any longer than the line limit into pieces."""
    for line in stream:
        while len(line) > LINE_LIMIT:
            yield line[:LINE_LIMIT]
            line = line[LINE_LIMIT:]
        if line:
            yield line


def run(path: str, out: Optional[TextIO] = None) -> Optional[AstNode]:
    """Process the file at ``path``, writing the report to ``out``; return the tree root."""
    stream = out if out is not None else sys.stdout
    parser = Parser(stream)
    with open(path, encoding="utf-8", newline="") as source:
        for line_number, line in enumerate(_read_lines(source), start=1):
            stream.write(f"-> Line {line_number}: {line}")
            tokens = tokenize_line(line, line_number, stream)
            parser.parse_tokens(tokens, line_number)
    print_ast(parser.root, 0, stream)
    return parser.root


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: parse the given file (``test.py`` by default)."""
    arg_parser = argparse.ArgumentParser(
        prog="pytoylex", description="Tokenize and parse a small script."
    )
    arg_parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = arg_parser.parse_args(argv)
    try:
        run(args.path, sys.stdout)
    except OSError:
        sys.stdout.write("Error opening file")
        return 1
    except ValueError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    return 0