"""
pcalc AST Node Definitions

All node types for the expression tree. Each node owns its children;
str(node) renders it back to canonical source text.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .lexer import TokenType


UINT32_MAX = 2**32 - 1

OPERATOR_SYMBOLS: dict[TokenType, str] = {
    TokenType.PLUS: '+',
    TokenType.MINUS: '-',
    TokenType.STAR: '*',
    TokenType.SLASH: '/',
}


# Source location for error messages
@dataclass
class Span:
    """Source location information."""
    start_line: int
    start_col: int
    end_line: int
    end_col: int
    filename: str = "<unknown>"


@dataclass
class Literal:
    """Unsigned integer literal: 42"""
    value: int
    span: Optional[Span] = None

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Separator:
    """Space between operands."""
    text: str = " "
    span: Optional[Span] = None

    def __str__(self) -> str:
        return self.text


@dataclass
class Grouping:
    """Parenthesized expression: (e)"""
    inner: "Expr"
    span: Optional[Span] = None

    def __str__(self) -> str:
        return f"({self.inner})"


@dataclass
class Binary:
    """Operator applied to a list of operands: + 1 2 3"""
    operator: TokenType
    operands: list["Expr"] = field(default_factory=list)
    span: Optional[Span] = None

    @property
    def symbol(self) -> str:
        return OPERATOR_SYMBOLS.get(self.operator, self.operator.name)

    def __str__(self) -> str:
        values = " ".join(str(op) for op in self.operands
                          if not isinstance(op, Separator))
        return f"{self.symbol} {values}"


Expr = Union[Literal, Separator, Grouping, Binary]
