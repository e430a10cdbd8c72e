"""
pcalc Parser - Recursive descent parser for prefix arithmetic.

Builds one expression tree from tokens. The precedence tiers are kept as
separate methods even though the language currently has a single tier.
"""

import logging
from typing import Optional

from .lexer import Token, TokenType, tokenize
from .errors import ParseError, NumericError
from .ast_nodes import Span, Literal, Separator, Grouping, Binary, Expr, UINT32_MAX

logger = logging.getLogger(__name__)

OPERATORS = (TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH)

# Groupings and operators that may enclose one another
MAX_DEPTH = 64


class Parser:
    """Recursive descent parser for pcalc."""

    def __init__(self, tokens: list[Token], filename: str = "<string>",
                 max_value: int = UINT32_MAX):
        self.tokens = tokens
        self.filename = filename
        self.max_value = max_value
        self.pos = 0
        self.depth = 0

    def current(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Advance and return previous token."""
        tok = self.current()
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def check(self, *types: TokenType) -> bool:
        """Check if current token is one of the given types."""
        return self.current().type in types

    def match(self, *types: TokenType) -> Optional[Token]:
        """If current token matches, consume and return it."""
        if self.check(*types):
            return self.advance()
        return None

    def expect(self, token_type: TokenType, msg: str = "") -> Token:
        """Expect current token to be of given type."""
        if not self.check(token_type):
            if not msg:
                msg = f"Expected {token_type.name}"
            raise ParseError(msg, self.current())
        return self.advance()

    def make_span(self, start: Token) -> Span:
        """Create span from start token to current position."""
        end = self.tokens[self.pos - 1] if self.pos > 0 else start
        return Span(start.line, start.column, end.line,
                    end.column + len(end.text), self.filename)

    # -------------------------------------------------------------------------
    # Expression parsing
    # -------------------------------------------------------------------------

    def parse(self) -> Expr:
        """Parse the whole token stream as a single expression."""
        expr = self.parse_expression()
        while self.match(TokenType.SPACE):
            pass
        self.expect(TokenType.EOF, "Expect end of input after expression.")
        logger.debug("parsed %s", expr)
        return expr

    def parse_expression(self) -> Expr:
        """Parse an expression."""
        return self.parse_term()

    def parse_term(self) -> Expr:
        return self.parse_factor()

    def parse_factor(self) -> Expr:
        return self.parse_unary()

    def parse_unary(self) -> Expr:
        return self.parse_primary()

    def parse_number(self, tok: Token) -> Literal:
        """Convert a NUMBER token to a literal within the numeric range."""
        digits = tok.text.lstrip("0") or "0"
        # Compare lengths first so huge runs never reach int()
        if len(digits) > len(str(self.max_value)) or int(digits) > self.max_value:
            raise NumericError(f"Number does not fit in range 0..{self.max_value}.",
                               tok.line, tok.column)
        return Literal(int(digits), self.make_span(tok))

    def enter(self, tok: Token) -> None:
        """Open one nesting level, refusing to go past MAX_DEPTH."""
        self.depth += 1
        if self.depth > MAX_DEPTH:
            raise ParseError("Expression nested too deeply.", tok)

    def parse_run(self) -> list[Expr]:
        """Parse NUMBER* followed by an optional parenthesized expression."""
        operands: list[Expr] = []
        while tok := self.match(TokenType.NUMBER):
            operands.append(self.parse_number(tok))
        if self.check(TokenType.LPAREN):
            operands.append(self.parse_expression())
        return operands

    def parse_primary(self) -> Expr:
        """Parse primary expressions: space, number, grouping, operator."""
        tok = self.current()

        if self.match(TokenType.SPACE):
            return Separator(tok.text, self.make_span(tok))

        if self.match(TokenType.NUMBER):
            return self.parse_number(tok)

        if self.match(TokenType.LPAREN):
            self.enter(tok)
            inner = self.parse_expression()
            self.expect(TokenType.RPAREN, "Expect ')' after expression.")
            self.depth -= 1
            return Grouping(inner, self.make_span(tok))

        if self.match(*OPERATORS):
            self.enter(tok)
            self.expect(TokenType.SPACE, "Expect space after operator.")
            operands = self.parse_run()
            # Delimiter after the first run, present even without a second run
            operands.append(Separator(" "))
            while self.match(TokenType.SPACE):
                operands.extend(self.parse_run())
            self.depth -= 1
            return Binary(tok.type, operands, self.make_span(tok))

        raise ParseError("Expect expression.", tok)


def parse_tokens(tokens: list[Token], filename: str = "<string>",
                 max_value: int = UINT32_MAX) -> Expr:
    """Parse an already scanned token list."""
    return Parser(tokens, filename, max_value).parse()


def parse(source: str, filename: str = "<string>", max_value: int = UINT32_MAX) -> Expr:
    """Convenience function to parse source code."""
    tokens = tokenize(source, filename)
    return parse_tokens(tokens, filename, max_value)
