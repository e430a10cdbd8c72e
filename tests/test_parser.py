"""
Parser Unit Tests

Tree shapes for each primary form and the fixed syntax errors.
"""

import pytest

from pcalc.lexer import TokenType, tokenize
from pcalc.parser import Parser, parse
from pcalc.ast_nodes import Literal, Separator, Grouping, Binary
from pcalc.errors import ParseError, NumericError, ErrorKind


def test_parser_literal():
    expr = parse("42")
    assert isinstance(expr, Literal)
    assert expr.value == 42


def test_parser_space():
    """A lone space parses to a separator leaf."""
    expr = parse(" ")
    assert isinstance(expr, Separator)
    assert expr.text == " "


def test_parser_grouping():
    expr = parse("(5)")
    assert isinstance(expr, Grouping)
    assert expr.inner == Literal(5, expr.inner.span)


def test_parser_nested_grouping():
    expr = parse("((7))")
    assert isinstance(expr, Grouping)
    assert isinstance(expr.inner, Grouping)
    assert str(expr) == "((7))"


def test_parser_binary_operands():
    """Synthetic separator follows the first run of numbers."""
    expr = parse("+ 2 3")
    assert isinstance(expr, Binary)
    assert expr.operator == TokenType.PLUS
    kinds = [type(op) for op in expr.operands]
    assert kinds == [Literal, Separator, Literal]


def test_parser_binary_separator_without_second_run():
    expr = parse("- 9")
    assert [type(op) for op in expr.operands] == [Literal, Separator]


def test_parser_binary_many_runs():
    expr = parse("+ 2 3 4")
    values = [op.value for op in expr.operands if isinstance(op, Literal)]
    assert values == [2, 3, 4]


def test_parser_binary_nested_expression():
    expr = parse("+ 1 (- 5 2)")
    assert isinstance(expr.operands[-1], Grouping)
    inner = expr.operands[-1].inner
    assert isinstance(inner, Binary)
    assert inner.operator == TokenType.MINUS
    assert str(expr) == "+ 1 (- 5 2)"


def test_parser_span():
    expr = parse("+ 10 20")
    assert expr.span.start_col == 1
    assert expr.span.end_col == 8


def test_parser_trailing_spaces_allowed():
    assert isinstance(parse("5  "), Literal)


def test_parser_missing_space_after_operator():
    with pytest.raises(ParseError) as excinfo:
        parse("+2")
    assert excinfo.value.message == "Expect space after operator."
    assert excinfo.value.kind == ErrorKind.SYNTAX


def test_parser_unmatched_paren():
    with pytest.raises(ParseError) as excinfo:
        parse("(5")
    assert excinfo.value.message == "Expect ')' after expression."
    assert excinfo.value.token.type == TokenType.EOF


@pytest.mark.parametrize("source", ["", ")", "(", "()"])
def test_parser_expect_expression(source):
    with pytest.raises(ParseError) as excinfo:
        parse(source)
    assert excinfo.value.message == "Expect expression."


def test_parser_trailing_tokens():
    with pytest.raises(ParseError) as excinfo:
        parse("(5) 3")
    assert excinfo.value.message == "Expect end of input after expression."


def test_parser_literal_out_of_range():
    with pytest.raises(NumericError):
        parse("4294967296")
    assert parse("4294967295").value == 4294967295


def test_parser_custom_width():
    with pytest.raises(NumericError):
        parse("256", max_value=255)


def test_parser_cursor_stops_at_eof():
    parser = Parser(tokenize("7"))
    parser.parse()
    assert parser.pos == len(parser.tokens) - 1
    parser.advance()
    assert parser.pos == len(parser.tokens) - 1


def test_parse_tokens_matches_parse():
    from pcalc.parser import parse_tokens
    assert parse_tokens(tokenize("+ 1 (2)")) == parse("+ 1 (2)")


def test_parser_huge_literal():
    """Digit runs past int() conversion limits are still range errors."""
    with pytest.raises(NumericError) as excinfo:
        parse("1" * 5000)
    assert excinfo.value.kind == ErrorKind.NUMERIC
    with pytest.raises(NumericError):
        parse("+ 1 " + "9" * 5000)


def test_parser_leading_zeros():
    assert parse("0" * 5000 + "42").value == 42
    assert parse("000").value == 0


def test_parser_nesting_limit():
    from pcalc.parser import MAX_DEPTH
    deep = "(" * MAX_DEPTH + "5" + ")" * MAX_DEPTH
    assert isinstance(parse(deep), Grouping)
    too_deep = "(" * (MAX_DEPTH + 1) + "5" + ")" * (MAX_DEPTH + 1)
    with pytest.raises(ParseError) as excinfo:
        parse(too_deep)
    assert excinfo.value.message == "Expression nested too deeply."
    with pytest.raises(ParseError):
        parse("(" * 250 + "5" + ")" * 250)


def test_parser_nesting_limit_counts_operators():
    from pcalc.parser import MAX_DEPTH
    pairs = MAX_DEPTH // 2
    assert isinstance(parse("+ 1 (" * pairs + "1" + ")" * pairs), Binary)
    with pytest.raises(ParseError):
        parse("+ 1 (" * (pairs + 1) + "1" + ")" * (pairs + 1))
