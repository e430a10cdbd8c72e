"""pcalc - scanner, parser and evaluator for prefix arithmetic."""

from .errors import (
    ErrorKind, CalcError, LexerError, ParseError, NumericError, EvaluationError
)
from .lexer import TokenType, Token, Lexer, tokenize
from .ast_nodes import Span, Literal, Separator, Grouping, Binary, Expr, UINT32_MAX
from .parser import Parser, parse, parse_tokens
from .interpreter import Interpreter, evaluate, run

__all__ = [
    'ErrorKind', 'CalcError', 'LexerError', 'ParseError', 'NumericError',
    'EvaluationError', 'TokenType', 'Token', 'Lexer', 'tokenize',
    'Span', 'Literal', 'Separator', 'Grouping', 'Binary', 'Expr', 'UINT32_MAX',
    'Parser', 'parse', 'parse_tokens', 'Interpreter', 'evaluate', 'run',
]
