"""
Integer arithmetic expression pipeline.

    text -> tokenize() -> tokens -> parse() -> tree -> evaluate() -> int

Each stage returns ``Ok(value)`` or ``Err(error)`` and stops at the first
fault it meets.
"""

from .ast_nodes import BinaryOp, Expression, Literal
from .errors import (
    ArithmeticErrorKind,
    EvaluationError,
    ExpressionError,
    LexicalError,
    ParseError,
    SyntaxErrorKind,
)
from .evaluator import DEFAULT_INTEGER_BITS, MAX_INTEGER_BITS, evaluate
from .parser import MAX_NESTING_DEPTH, parse
from .results import Err, Ok, Result
from .tokenizer import tokenize
from .tokens import Token, TokenType

__all__ = [
    'tokenize', 'parse', 'evaluate', 'MAX_NESTING_DEPTH', 'DEFAULT_INTEGER_BITS', 'MAX_INTEGER_BITS',
    'Token', 'TokenType', 'Literal', 'BinaryOp', 'Expression',
    'Ok', 'Err', 'Result',
    'ExpressionError', 'LexicalError', 'ParseError', 'EvaluationError',
    'SyntaxErrorKind', 'ArithmeticErrorKind',
]
