"""Lexer, pattern parser and syntax tree printer for a small Python-like language."""

__version__ = "0.1.0"
__all__ = ["syntax_tree", "lexer", "parser", "cli"]