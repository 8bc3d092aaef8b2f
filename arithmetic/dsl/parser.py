from dataclasses import dataclass, replace
from typing import Tuple

from .ast_nodes import BinaryOp, Literal
from .errors import ParseError, SyntaxErrorKind
from .results import Err, Ok
from .tokens import Token, TokenType

# Each open parenthesis costs several stack frames; this keeps the deepest
# accepted input well inside Python's default recursion limit.
MAX_NESTING_DEPTH = 100


@dataclass(frozen=True)
class Cursor:
    """Read position in a token sequence whose last element is END."""

    tokens: Tuple[Token, ...]
    index: int = 0
    depth: int = 0

    @property
    def current(self):
        return self.tokens[self.index]

    def advance(self):
        # END is never stepped past.
        if self.current.kind == TokenType.END:
            return self
        return replace(self, index=self.index + 1)


def parse(tokens):
    """
    Build an expression tree from a token sequence.

    Grammar, lowest to highest binding:

        expression := term { ('+' | '-') term }
        term       := factor { ('*' | '/') factor }
        factor     := '(' expression ')' | NUMBER

    Returns:
        Ok(Expression) or Err(ParseError) for the first misplaced token,
        including anything left over before END, or for parentheses nested
        deeper than MAX_NESTING_DEPTH.
    """
    tokens = tuple(tokens)
    if not tokens or tokens[-1].kind != TokenType.END:
        end_position = tokens[-1].position + 1 if tokens else 0
        tokens += (Token(TokenType.END, None, end_position),)

    result = expression(Cursor(tokens))
    if result.is_err():
        return result

    node, cursor = result.value
    if cursor.current.kind != TokenType.END:
        return Err(ParseError(SyntaxErrorKind.UNEXPECTED_TOKEN, cursor.current))
    return Ok(node)


def expression(cursor):
    return _binary_level(cursor, term, (TokenType.PLUS, TokenType.MINUS))


def term(cursor):
    return _binary_level(cursor, factor, (TokenType.STAR, TokenType.SLASH))


def _binary_level(cursor, operand, operators):
    # Folding each new operand onto the tree built so far makes the level
    # left-associative: a - b - c is (a - b) - c.
    result = operand(cursor)
    if result.is_err():
        return result
    node, cursor = result.value

    while cursor.current.kind in operators:
        op = cursor.current
        result = operand(cursor.advance())
        if result.is_err():
            return result
        right, cursor = result.value
        node = BinaryOp(node, right, op)

    return Ok((node, cursor))


def factor(cursor):
    token = cursor.current

    if token.kind == TokenType.LEFT_PAREN:
        if cursor.depth >= MAX_NESTING_DEPTH:
            return Err(ParseError(SyntaxErrorKind.TOO_DEEPLY_NESTED, token))
        result = expression(replace(cursor.advance(), depth=cursor.depth + 1))
        if result.is_err():
            return result
        node, inner = result.value
        if inner.current.kind != TokenType.RIGHT_PAREN:
            return Err(ParseError(SyntaxErrorKind.MISSING_RIGHT_PAREN, inner.current))
        return Ok((node, replace(inner.advance(), depth=cursor.depth)))

    if token.kind == TokenType.NUMBER:
        return Ok((Literal(token), cursor.advance()))

    return Err(ParseError(SyntaxErrorKind.UNEXPECTED_TOKEN, token))
