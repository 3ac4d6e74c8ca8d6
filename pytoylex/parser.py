"""Pattern-based parsing of token lines into a chain of syntax tree nodes."""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, Sequence, TextIO, Union

from .lexer import Token, TokenType
from .syntax_tree import AstNode, NodeType

_ARITHMETIC = frozenset(
    {TokenType.ADD, TokenType.SUB, TokenType.MUL, TokenType.DIV, TokenType.INT_DIV}
)
_COMPARISON = frozenset(
    {
        TokenType.GREATER_THAN,
        TokenType.LESS_THAN,
        TokenType.EQUAL,
        TokenType.NOT_EQUAL,
        TokenType.GREATER_THAN_OR_EQUAL,
        TokenType.LESS_THAN_OR_EQUAL,
    }
)
_LOGICAL = frozenset({TokenType.AND, TokenType.OR, TokenType.NOT})


def is_id_or_num(token: Token) -> bool:
    """True for identifiers and numbers."""
    return token.type in (TokenType.IDENTIFIER, TokenType.NUMBER)


def is_arithmetic_op(token: Token) -> bool:
    """True for ``+ - * / //``."""
    return token.type in _ARITHMETIC


def is_comparison_op(token: Token) -> bool:
    """True for ``> < == != >= <=``."""
    return token.type in _COMPARISON


def is_logical_op(token: Token) -> bool:
    """True for ``and or not``."""
    return token.type in _LOGICAL


def _is_string_or_operand(token: Token) -> bool:
    return token.type is TokenType.STRING or is_id_or_num(token)


def _anything(token: Token) -> bool:
    return True


_Check = Union[TokenType, Callable[[Token], bool]]


def _matches(tokens: Sequence[Token], start: int, pattern: Sequence[_Check]) -> bool:
    """Check that ``pattern`` fits the tokens beginning at ``start``."""
    window = tokens[start : start + len(pattern)]
    if len(window) < len(pattern):
        return False
    for check, tok in zip(pattern, window):
        if isinstance(check, TokenType):
            if tok.type is not check:
                return False
        elif not check(tok):
            return False
    return True


class Parser:
    """Recognises statements line by line and links their nodes in a chain."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out
        self.root: Optional[AstNode] = None
        self._last: Optional[AstNode] = None

    @property
    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _append(self, node: AstNode) -> AstNode:
        if self._last is None:
            self.root = node
        else:
            self._last.right = node
        self._last = node
        return node

    def nodes(self) -> List[AstNode]:
        """Return every top-level node parsed so far, in order."""
        return list(self.root.chain()) if self.root is not None else []

    def parse_tokens(self, tokens: Sequence[Token], line_number: int) -> List[AstNode]:
        """Parse one line's tokens, report progress, and return the nodes created."""
        write = self._stream.write
        created: List[AstNode] = []
        write(f"-- Parsing line {line_number} --\n")

        def add(node: AstNode, message: str) -> None:
            created.append(self._append(node))
            write(message + "\n")

        i = 0
        while i < len(tokens):
            t = tokens[i : i + 9]
            v = [tok.value for tok in t]

            if _matches(tokens, i, (TokenType.IDENTIFIER, TokenType.ASSIGN, is_id_or_num,
                                    is_arithmetic_op, is_id_or_num)):
                add(AstNode(NodeType.ARITHMETIC, v[0], v[3], v[4]),
                    f"Created AST node for arithmetic assignment: {v[0]} = ... {v[3]} {v[4]}")
                i += 5
                continue

            if _matches(tokens, i, (TokenType.IDENTIFIER, TokenType.ASSIGN, is_id_or_num)):
                add(AstNode(NodeType.ASSIGNMENT, v[0], v[2], ""),
                    f"Created AST node for assignment: {v[0]} = {v[2]}")
                i += 3
                continue

            if _matches(tokens, i, (TokenType.IF, is_id_or_num, is_comparison_op,
                                    is_id_or_num, TokenType.COLON)):
                add(AstNode(NodeType.IF, v[1], v[2], v[3]),
                    f"Created AST node for if statement: if {v[1]} {v[2]} {v[3]}:")
                i += 5
                continue

            if _matches(tokens, i, (TokenType.IF, is_id_or_num, is_comparison_op, is_id_or_num,
                                    TokenType.AND, is_id_or_num, is_comparison_op,
                                    is_id_or_num, TokenType.COLON)):
                node = AstNode(NodeType.IF, v[1], v[2], v[3])
                node.left = AstNode(NodeType.LOGICAL, v[5], v[6], v[7])
                add(node,
                    "Created AST node for if statement with logical operator: "
                    f"if {v[1]} {v[2]} {v[3]} and {v[5]} {v[6]} {v[7]}:")
                i += 9
                continue

            if _matches(tokens, i, (TokenType.ELSE, TokenType.COLON)):
                add(AstNode(NodeType.ELSE), "Created AST node for else statement:")
                i += 2
                continue

            if _matches(tokens, i, (TokenType.ELIF, is_id_or_num, is_comparison_op,
                                    is_id_or_num, TokenType.COLON)):
                add(AstNode(NodeType.IF, v[1], v[2], v[3]),
                    f"Created AST node for elif statement: elif {v[1]} {v[2]} {v[3]}:")
                i += 5
                continue

            if t[0].type is TokenType.PRINT:
                if _matches(tokens, i, (TokenType.PRINT, TokenType.LEFT_PAREN,
                                        TokenType.STRING, TokenType.RIGHT_PAREN)) or \
                        _matches(tokens, i, (TokenType.PRINT, TokenType.LEFT_PAREN,
                                             is_id_or_num, TokenType.RIGHT_PAREN)):
                    add(AstNode(NodeType.PRINT, v[2], "", ""),
                        f"Created AST node for print statement: print({v[2]})")
                    i += 4
                    continue
                if _matches(tokens, i, (TokenType.PRINT, TokenType.LEFT_PAREN,
                                        _is_string_or_operand, TokenType.COMMA,
                                        is_id_or_num, TokenType.RIGHT_PAREN)):
                    add(AstNode(NodeType.PRINT, v[2], v[4], ""),
                        "Created AST node for print statement with multiple arguments: "
                        f"print({v[2]}, {v[4]})")
                    i += 6
                    continue
                if _matches(tokens, i, (TokenType.PRINT, TokenType.LEFT_PAREN,
                                        _is_string_or_operand, TokenType.COMMA,
                                        is_id_or_num, TokenType.COMMA,
                                        is_id_or_num, TokenType.RIGHT_PAREN)):
                    add(AstNode(NodeType.PRINT, v[2], v[4], v[6]),
                        "Created AST node for print statement with three arguments: "
                        f"print({v[2]}, {v[4]}, {v[6]})")
                    i += 8
                    continue

            if _matches(tokens, i, (_anything, TokenType.LEFT_PAREN, is_id_or_num,
                                    TokenType.RIGHT_PAREN)):
                add(AstNode(NodeType.FUNCTION_CALL, v[0], v[2], ""),
                    f"Created AST node for function call: {v[0]}({v[2]})")
                i += 4
                continue

            if _matches(tokens, i, (TokenType.WHILE, is_id_or_num, is_comparison_op,
                                    is_id_or_num, TokenType.COLON)):
                add(AstNode(NodeType.WHILE, v[1], v[2], v[3]),
                    f"Created AST node for while loop: while {v[1]} {v[2]} {v[3]}:")
                i += 5
                continue

            if _matches(tokens, i, (_anything, is_arithmetic_op, is_id_or_num)):
                add(AstNode(NodeType.ARITHMETIC, v[0], v[1], v[2]),
                    f"Created AST node for arithmetic operation: {v[0]} {v[1]} {v[2]}")
                i += 3
                continue

            if _matches(tokens, i, (_anything, is_comparison_op, is_id_or_num)):
                add(AstNode(NodeType.COMPARISON, v[0], v[1], v[2]),
                    f"Created AST node for comparison: {v[0]} {v[1]} {v[2]}")
                i += 3
                continue

            if _matches(tokens, i, (_anything, is_logical_op, is_id_or_num)):
                add(AstNode(NodeType.LOGICAL, v[0], v[1], v[2]),
                    f"Created AST node for logical operation: {v[0]} {v[1]} {v[2]}")
                i += 3
                continue

            write(f"Syntax error or unrecognized statement at token {i}: {v[0]}\n")
            i += 1

        write(f"-- End of parsing line {line_number} --\n\n")
        return created