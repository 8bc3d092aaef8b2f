from .ast_nodes import BinaryOp, Literal
from .errors import ArithmeticErrorKind, EvaluationError
from .results import Err, Ok
from .tokens import TokenType

DEFAULT_INTEGER_BITS = 64
# The largest bound, 2**4095, has 1233 decimal digits, well under the
# int/str conversion limit.
MAX_INTEGER_BITS = 4096


def integer_bounds(bits):
    """Inclusive range of a signed two's complement integer of ``bits`` width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def truncating_divide(left, right):
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def evaluate(node, *, bits=DEFAULT_INTEGER_BITS):
    """
    Reduce an expression tree to a single integer.

    Every literal and every intermediate result must fit a signed integer of
    ``bits`` width; anything outside that range is reported as OVERFLOW for
    all four operators alike.

    Returns:
        Ok(int) or Err(EvaluationError)

    Raises:
        ValueError: if ``bits`` is outside [2, MAX_INTEGER_BITS]
    """
    if not 2 <= bits <= MAX_INTEGER_BITS:
        raise ValueError(f"bits must be between 2 and {MAX_INTEGER_BITS}, got {bits}")
    lowest, highest = integer_bounds(bits)
    return _eval(node, lowest, highest)


def _eval(node, lowest, highest):
    match node:
        case Literal(token=token):
            return _literal(token.text, lowest, highest)

        case BinaryOp(left=left, right=right, op=op):
            left_result = _eval(left, lowest, highest)
            if left_result.is_err():
                return left_result
            right_result = _eval(right, lowest, highest)
            if right_result.is_err():
                return right_result

            a, b = left_result.value, right_result.value
            kind = op.kind
            if kind == TokenType.PLUS:
                value = a + b
            elif kind == TokenType.MINUS:
                value = a - b
            elif kind == TokenType.STAR:
                value = a * b
            elif kind == TokenType.SLASH:
                if b == 0:
                    return Err(EvaluationError(ArithmeticErrorKind.DIVISION_BY_ZERO, f"{a} / 0"))
                value = truncating_divide(a, b)
            else:
                raise TypeError(f"Unsupported operator {op}")

            if not lowest <= value <= highest:
                return Err(EvaluationError(
                    ArithmeticErrorKind.OVERFLOW, f"{a} {op.text} {b} does not fit in {highest.bit_length() + 1} bits"
                ))
            return Ok(value)

    raise TypeError(f"Invalid AST node: {node!r}")


def _literal(text, lowest, highest):
    digits = text.lstrip('0') or '0'
    # Checked before int() so huge digit runs never hit the int/str
    # conversion limit.
    if len(digits) > len(str(highest)) or int(digits) > highest:
        return Err(EvaluationError(
            ArithmeticErrorKind.OVERFLOW, f"literal {text} does not fit in {highest.bit_length() + 1} bits"
        ))
    return Ok(int(digits))
