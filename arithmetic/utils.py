"""
Service helpers that run the full arithmetic pipeline.
"""
import logging
from typing import Optional

from .conf import get_integer_bits
from .dsl import Result, evaluate, parse, tokenize

logger = logging.getLogger(__name__)


def evaluate_expression(expression: str, bits: Optional[int] = None) -> Result:
    """
    Tokenize, parse and evaluate an expression in one call.

    The first stage that fails short-circuits the rest; its Err is returned
    as is, so the caller sees exactly which stage rejected the input.

    Args:
        expression: Source text, e.g. "(3 + 5) * (2 - 1)"
        bits: Integer width for evaluation; defaults to ARITHMETIC_INTEGER_BITS

    Returns:
        Ok(int) or Err(ExpressionError)
    """
    if bits is None:
        bits = get_integer_bits()

    result = tokenize(expression)
    if result.is_ok():
        result = parse(result.value)
    if result.is_ok():
        result = evaluate(result.value, bits=bits)

    if result.is_err():
        logger.debug(f"Expression evaluation error: {result.error} for expression: {expression!r}")
    else:
        logger.debug(f"Evaluated {expression!r} to {result.value}")
    return result
