"""Splitting source lines into classified tokens."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, TextIO

MAX_TOKEN_LENGTH = 100
MAX_TOKENS_PER_LINE = 100

_WHITESPACE = " \t\n\v\f\r"
_PUNCTUATION = "():,"


class TokenType(Enum):
    """Token categories; each value is the category's display name."""

    IDENTIFIER = "TOKEN_IDENTIFIER"
    NUMBER = "TOKEN_NUMBER"
    STRING = "TOKEN_STRING"
    ADD = "TOKEN_ADD"
    SUB = "TOKEN_SUB"
    MUL = "TOKEN_MUL"
    DIV = "TOKEN_DIV"
    INT_DIV = "TOKEN_INT_DIV"
    ASSIGN = "TOKEN_ASSIGN"
    GREATER_THAN = "TOKEN_GREATER_THAN"
    LESS_THAN = "TOKEN_LESS_THAN"
    EQUAL = "TOKEN_EQUAL"
    NOT_EQUAL = "TOKEN_NOT_EQUAL"
    GREATER_THAN_OR_EQUAL = "TOKEN_GREATER_THAN_OR_EQUAL"
    LESS_THAN_OR_EQUAL = "TOKEN_LESS_THAN_OR_EQUAL"
    AND = "TOKEN_AND"
    OR = "TOKEN_OR"
    NOT = "TOKEN_NOT"
    PRINT = "TOKEN_PRINT"
    IF = "TOKEN_IF"
    ELSE = "TOKEN_ELSE"
    ELIF = "TOKEN_ELIF"
    WHILE = "TOKEN_WHILE"
    COMMA = "TOKEN_COMMA"
    COLON = "TOKEN_COLON"
    LEFT_PAREN = "TOKEN_LEFT_PAREN"
    RIGHT_PAREN = "TOKEN_RIGHT_PAREN"
    LEFT_BRACKET = "TOKEN_LEFT_BRACKET"
    RIGHT_BRACKET = "TOKEN_RIGHT_BRACKET"
    UNKNOWN = "TOKEN_UNKNOWN"


@dataclass(frozen=True)
class Token:
    """A classified piece of source text."""

    type: TokenType
    value: str


_FIXED = {
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "elif": TokenType.ELIF,
    "+": TokenType.ADD,
    "-": TokenType.SUB,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    "//": TokenType.INT_DIV,
    "=": TokenType.ASSIGN,
    ">": TokenType.GREATER_THAN,
    "<": TokenType.LESS_THAN,
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    ">=": TokenType.GREATER_THAN_OR_EQUAL,
    "<=": TokenType.LESS_THAN_OR_EQUAL,
    "and": TokenType.AND,
    "or": TokenType.OR,
    "not": TokenType.NOT,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
}


def _is_ascii_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_ascii_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def identify_token(text: str) -> Token:
    """Classify a piece of text as a token."""
    kind = _FIXED.get(text)
    if kind is not None:
        return Token(kind, text)
    first = text[:1]
    if _is_ascii_alpha(first):
        kind = TokenType.PRINT if text == "print" else TokenType.IDENTIFIER
        return Token(kind, text)
    if _is_ascii_digit(first):
        return Token(TokenType.NUMBER, text)
    if text.startswith('"') and text.endswith('"'):
        return Token(TokenType.STRING, text)
    return Token(TokenType.UNKNOWN, text)


def split_line(line: str) -> Iterator[str]:
    """Yield the raw token texts of a line, stopping at a ``#`` comment."""
    buffer: List[str] = []
    in_string = False

    def take() -> str:
        text = "".join(buffer)
        buffer.clear()
        return text

    def push(ch: str) -> None:
        buffer.append(ch)
        if len(buffer) >= MAX_TOKEN_LENGTH:
            raise ValueError(
                f"token longer than {MAX_TOKEN_LENGTH - 1} characters: {''.join(buffer)[:20]}..."
            )

    for ch in line:
        if ch == "#":
            break
        if in_string:
            push(ch)
            if ch == '"':
                yield take()
                in_string = False
        elif ch in _WHITESPACE:
            if buffer:
                yield take()
        elif ch in _PUNCTUATION:
            if buffer:
                yield take()
            yield ch
        elif ch == '"':
            push(ch)
            in_string = True
        else:
            push(ch)
    if buffer:
        yield take()


def tokenize_line(
    line: str, line_number: int, out: Optional[TextIO] = None
) -> List[Token]:
    """Tokenize a line, reporting each token to ``out``; unknown tokens are reported and dropped."""
    stream = out if out is not None else sys.stdout
    tokens: List[Token] = []
    for text in split_line(line):
        tok = identify_token(text)
        if tok.type is TokenType.UNKNOWN:
            stream.write(f"Error: unknown token in line {line_number}: {line}")
            continue
        if len(tokens) >= MAX_TOKENS_PER_LINE:
            raise ValueError(
                f"more than {MAX_TOKENS_PER_LINE} tokens in line {line_number}"
            )
        stream.write(f"Token: {tok.value}, Type: {tok.type.value}\n")
        tokens.append(tok)
    return tokens