"""
pcalc Errors - Error kinds raised by the scanner, parser and interpreter.

Every stage raises instead of exiting; the CLI decides what a failure means.
"""

from enum import Enum


class ErrorKind(Enum):
    """Broad category of a pipeline failure."""
    LEXICAL = "LexicalError"
    SYNTAX = "SyntaxError"
    NUMERIC = "NumericError"
    EVALUATION = "EvaluationError"


class CalcError(Exception):
    """Base class for all pipeline errors."""
    kind: ErrorKind

    def __init__(self, message: str, line: int = 1, column: int = 1):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line}, column {column}")

    def report(self) -> str:
        """Format as a one-line diagnostic for the user."""
        return f"[line {self.line}] Error: {self.message}"


class LexerError(CalcError):
    """Character that matches no token class."""
    kind = ErrorKind.LEXICAL


class ParseError(CalcError):
    """Token sequence that does not fit the grammar."""
    kind = ErrorKind.SYNTAX

    def __init__(self, message: str, token):
        self.token = token
        super().__init__(message, token.line, token.column)


class NumericError(CalcError):
    """Literal out of range, or arithmetic overflow/underflow."""
    kind = ErrorKind.NUMERIC


class EvaluationError(CalcError):
    """Node or operator the interpreter has no rule for."""
    kind = ErrorKind.EVALUATION
