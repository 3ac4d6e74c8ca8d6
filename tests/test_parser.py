import io

import pytest

from pytoylex.lexer import Token, TokenType, tokenize_line
from pytoylex.parser import (
    Parser,
    is_arithmetic_op,
    is_comparison_op,
    is_id_or_num,
    is_logical_op,
)
from pytoylex.syntax_tree import NodeType


def _parse(*lines):
    out = io.StringIO()
    parser = Parser(out)
    for number, line in enumerate(lines, start=1):
        parser.parse_tokens(tokenize_line(line, number, io.StringIO()), number)
    return parser, out.getvalue()


def _values(node):
    return (node.type, node.value1, node.value2, node.value3)


def test_predicates():
    assert is_id_or_num(Token(TokenType.IDENTIFIER, "a"))
    assert is_id_or_num(Token(TokenType.NUMBER, "5"))
    assert not is_id_or_num(Token(TokenType.STRING, '"x"'))
    assert is_arithmetic_op(Token(TokenType.INT_DIV, "//"))
    assert not is_arithmetic_op(Token(TokenType.ASSIGN, "="))
    assert is_comparison_op(Token(TokenType.LESS_THAN_OR_EQUAL, "<="))
    assert not is_comparison_op(Token(TokenType.AND, "and"))
    assert is_logical_op(Token(TokenType.NOT, "not"))
    assert not is_logical_op(Token(TokenType.EQUAL, "=="))


def test_assignment():
    parser, text = _parse("a = 5")
    assert _values(parser.root) == (NodeType.ASSIGNMENT, "a", "5", "")
    assert "Created AST node for assignment: a = 5\n" in text
    assert text.startswith("-- Parsing line 1 --\n")
    assert text.endswith("-- End of parsing line 1 --\n\n")


def test_arithmetic_assignment():
    parser, text = _parse("a = a + 1")
    assert _values(parser.root) == (NodeType.ARITHMETIC, "a", "+", "1")
    assert "Created AST node for arithmetic assignment: a = ... + 1\n" in text


def test_simple_if():
    parser, _ = _parse("if a > 5:")
    assert _values(parser.root) == (NodeType.IF, "a", ">", "5")
    assert parser.root.left is None


def test_if_with_and_links_logical_child():
    parser, text = _parse("if a > 5 and b < 10:")
    assert _values(parser.root) == (NodeType.IF, "a", ">", "5")
    assert _values(parser.root.left) == (NodeType.LOGICAL, "b", "<", "10")
    assert len(parser.nodes()) == 1
    assert "if a > 5 and b < 10:\n" in text


def test_else_and_elif():
    parser, text = _parse("elif a < 10:", "else:")
    nodes = parser.nodes()
    assert [_values(n) for n in nodes] == [
        (NodeType.IF, "a", "<", "10"),
        (NodeType.ELSE, "", "", ""),
    ]
    assert "Created AST node for else statement:\n" in text


def test_print_forms():
    parser, _ = _parse('print("hi")', "print(x)", 'print("v", x)', 'print("v", x, 3)')
    assert [_values(n) for n in parser.nodes()] == [
        (NodeType.PRINT, '"hi"', "", ""),
        (NodeType.PRINT, "x", "", ""),
        (NodeType.PRINT, '"v"', "x", ""),
        (NodeType.PRINT, '"v"', "x", "3"),
    ]


def test_function_call_and_while():
    parser, _ = _parse("add(a)", "while a < 10:")
    assert [_values(n) for n in parser.nodes()] == [
        (NodeType.FUNCTION_CALL, "add", "a", ""),
        (NodeType.WHILE, "a", "<", "10"),
    ]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("5 + 10", (NodeType.ARITHMETIC, "5", "+", "10")),
        ("a >= 5", (NodeType.COMPARISON, "a", ">=", "5")),
        ("a and b", (NodeType.LOGICAL, "a", "and", "b")),
    ],
)
def test_expressions(line, expected):
    parser, _ = _parse(line)
    assert _values(parser.root) == expected


def test_syntax_error_reported_and_skipped():
    parser, text = _parse("a")
    assert "Syntax error or unrecognized statement at token 0: a\n" in text
    assert parser.nodes() == []
    assert parser.root is None


def test_returns_created_nodes_and_chains_across_lines():
    out = io.StringIO()
    parser = Parser(out)
    first = parser.parse_tokens(tokenize_line("a = 1", 1, io.StringIO()), 1)
    second = parser.parse_tokens(tokenize_line("b = 2", 2, io.StringIO()), 2)
    assert len(first) == 1 and len(second) == 1
    assert parser.root is first[0]
    assert first[0].right is second[0]
    assert parser.nodes() == first + second