"""
Failure types for the arithmetic pipeline.

Each stage reports its first fault as one of these. They are exceptions so
that ``Result.unwrap()`` can raise them, but the pipeline itself returns
them inside ``Err`` rather than raising.
"""
from enum import Enum


class SyntaxErrorKind(Enum):
    MISSING_RIGHT_PAREN = "missing_right_paren"
    UNEXPECTED_TOKEN = "unexpected_token"
    TOO_DEEPLY_NESTED = "too_deeply_nested"


class ArithmeticErrorKind(Enum):
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"


class ExpressionError(Exception):
    """Base class for every pipeline fault."""

    stage = None

    def as_dict(self):
        return {"stage": self.stage}


class LexicalError(ExpressionError):
    stage = "lexical"

    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character: {char!r} at position {position}")

    def as_dict(self):
        return {
            "stage": self.stage,
            "kind": "invalid_character",
            "character": self.char,
            "position": self.position,
        }


class ParseError(ExpressionError):
    stage = "syntax"

    def __init__(self, kind, token):
        self.kind = kind
        self.token = token
        if kind is SyntaxErrorKind.MISSING_RIGHT_PAREN:
            message = f"Missing right parenthesis, found {token}"
        elif kind is SyntaxErrorKind.TOO_DEEPLY_NESTED:
            message = f"Parentheses nested too deeply at position {token.position}"
        else:
            message = f"Unexpected token: {token}"
        super().__init__(message)

    def as_dict(self):
        return {
            "stage": self.stage,
            "kind": self.kind.value,
            "token": {
                "kind": self.token.kind.name,
                "text": self.token.text,
                "position": self.token.position,
            },
        }


class EvaluationError(ExpressionError):
    stage = "arithmetic"

    def __init__(self, kind, detail=""):
        self.kind = kind
        message = "Division by zero" if kind is ArithmeticErrorKind.DIVISION_BY_ZERO else "Integer overflow"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    def as_dict(self):
        return {"stage": self.stage, "kind": self.kind.value}
