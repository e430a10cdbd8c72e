"""
pcalc Lexer - Tokenizes prefix arithmetic expressions.

Spaces are significant: each one becomes its own SPACE token.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from .errors import LexerError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """All token types recognized by the lexer."""

    # Delimiters
    LPAREN = auto()         # (
    RPAREN = auto()         # )

    # Operators
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # * (reserved, never scanned)
    SLASH = auto()          # / (reserved, never scanned)

    # Literals
    NUMBER = auto()
    SPACE = auto()

    # Special
    EOF = auto()


# Single-character tokens
SIMPLE_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    " ": TokenType.SPACE,
}


@dataclass(frozen=True)
class Token:
    """A single token from the source code."""
    type: TokenType
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        if self.text:
            return f"Token({self.type.name}, {self.text!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"


class Lexer:
    """Tokenizes pcalc source code."""

    def __init__(self, source: str, filename: str = "<string>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def current_char(self) -> str:
        """Return current character or empty string at EOF."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def advance(self) -> str:
        """Advance position and return the character we passed."""
        ch = self.current_char()
        self.pos += 1
        self.column += 1
        return ch

    def read_number(self) -> Token:
        """Read a run of decimal digits."""
        start_col = self.column
        digits = []
        while self.current_char().isascii() and self.current_char().isdigit():
            digits.append(self.advance())
        return Token(TokenType.NUMBER, ''.join(digits), self.line, start_col)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source."""
        while self.pos < len(self.source):
            ch = self.current_char()

            if ch.isascii() and ch.isdigit():
                self.tokens.append(self.read_number())
                continue

            match ch:
                case '(' | ')' | '+' | '-' | ' ':
                    start_col = self.column
                    self.advance()
                    self.tokens.append(Token(SIMPLE_TOKENS[ch], ch, self.line, start_col))

                case _:
                    raise LexerError(f"Unexpected character {ch!r}.", self.line, self.column)

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.column))
        logger.debug("%s: %d tokens", self.filename, len(self.tokens))
        return self.tokens


def tokenize(source: str, filename: str = "<string>") -> list[Token]:
    """Convenience function to tokenize source code."""
    lexer = Lexer(source, filename)
    return lexer.tokenize()
