"""Syntax tree nodes built by the parser, and their printable form."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional, TextIO

VALUE_LIMIT = 64


class NodeType(Enum):
    """Kinds of statement a node can stand for."""

    ASSIGNMENT = auto()
    ARITHMETIC = auto()
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    PRINT = auto()
    LOGICAL = auto()
    COMPARISON = auto()
    FUNCTION_CALL = auto()


@dataclass
class AstNode:
    """A tree node holding up to three values and two children."""

    type: NodeType
    value1: str = ""
    value2: str = ""
    value3: str = ""
    left: Optional[AstNode] = field(default=None, repr=False)
    right: Optional[AstNode] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.value1 = self.value1[:VALUE_LIMIT]
        self.value2 = self.value2[:VALUE_LIMIT]
        self.value3 = self.value3[:VALUE_LIMIT]

    def describe(self) -> str:
        """Return the one-line description of this node, without indentation."""
        v1, v2, v3 = self.value1, self.value2, self.value3
        if self.type is NodeType.ASSIGNMENT:
            return f"Assignment: {v1} = {v2}"
        if self.type is NodeType.ELSE:
            return "Else"
        if self.type is NodeType.PRINT:
            return f"Print: {v1}"
        if self.type is NodeType.FUNCTION_CALL:
            return f"Function call: {v1}({v2})"
        label = {
            NodeType.ARITHMETIC: "Arithmetic",
            NodeType.IF: "If",
            NodeType.WHILE: "While",
            NodeType.LOGICAL: "Logical",
            NodeType.COMPARISON: "Comparison",
        }[self.type]
        return f"{label}: {v1} {v2} {v3}"

    def chain(self) -> Iterator[AstNode]:
        """Yield this node and every node reached by following right links."""
        node: Optional[AstNode] = self
        while node is not None:
            yield node
            node = node.right


def format_ast(root: Optional[AstNode], indent: int = 0) -> str:
    """Render the tree depth first, each child one level deeper than its parent."""
    lines = []
    stack = [(root, indent)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        lines.append("  " * depth + node.describe() + "\n")
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))
    return "".join(lines)


def print_ast(
    root: Optional[AstNode], indent: int = 0, out: Optional[TextIO] = None
) -> None:
    """Write the rendered tree to ``out`` (standard output by default)."""
    (out if out is not None else sys.stdout).write(format_ast(root, indent))