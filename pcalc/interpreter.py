"""
pcalc Interpreter - Tree-walking evaluator.

Reduces an expression tree to a decimal string. Operand values are carried
as ints; separators only delimit operands and contribute no value.
"""

import logging

from .lexer import TokenType
from .errors import NumericError, EvaluationError
from .ast_nodes import Literal, Separator, Grouping, Binary, Expr, UINT32_MAX
from .parser import parse

logger = logging.getLogger(__name__)


class Interpreter:
    """Evaluates expression trees over unsigned integers."""

    def __init__(self, max_value: int = UINT32_MAX):
        self.max_value = max_value

    def evaluate(self, expr: Expr) -> str:
        """Evaluate a node to its textual value."""
        match expr:
            case Literal(value=value):
                return str(value)
            case Separator(text=text):
                return text
            case Grouping(inner=inner):
                return self.evaluate(inner)
            case Binary():
                return str(self.eval_binary(expr))
            case _:
                raise EvaluationError(f"Cannot evaluate {type(expr).__name__}.")

    def operand_values(self, expr: Expr) -> list[int]:
        """Integer values an operand contributes to its enclosing operator."""
        match expr:
            case Literal(value=value):
                return [value]
            case Separator():
                return []
            case Grouping(inner=inner):
                return self.operand_values(inner)
            case Binary():
                return [self.eval_binary(expr)]
            case _:
                raise EvaluationError(f"Cannot evaluate {type(expr).__name__}.")

    def eval_binary(self, expr: Binary) -> int:
        """Fold the operator over its operands, left to right."""
        line, column = (expr.span.start_line, expr.span.start_col) if expr.span else (1, 1)

        if expr.operator not in (TokenType.PLUS, TokenType.MINUS):
            raise EvaluationError("Unknown operation.", line, column)

        values: list[int] = []
        for operand in expr.operands:
            values.extend(self.operand_values(operand))
        if not values:
            raise NumericError(f"Operator '{expr.symbol}' has no operands.", line, column)

        result = values[0]
        for value in values[1:]:
            if expr.operator == TokenType.PLUS:
                result += value
                if result > self.max_value:
                    raise NumericError("Addition overflow.", line, column)
            else:
                if value > result:
                    raise NumericError(f"Subtraction underflow: {result} - {value}.",
                                       line, column)
                result -= value

        logger.debug("%s -> %d", expr, result)
        return result


def evaluate(expr: Expr, max_value: int = UINT32_MAX) -> str:
    """Convenience function to evaluate a tree."""
    return Interpreter(max_value).evaluate(expr)


def run(source: str, filename: str = "<string>", max_value: int = UINT32_MAX) -> str:
    """Scan, parse and evaluate source text."""
    expr = parse(source, filename, max_value)
    result = evaluate(expr, max_value)
    logger.debug("%s: %r = %s", filename, source, result)
    return result
