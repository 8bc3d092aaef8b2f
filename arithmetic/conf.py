from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .dsl import DEFAULT_INTEGER_BITS, MAX_INTEGER_BITS


def get_integer_bits() -> int:
    """Return the configured evaluation width, ARITHMETIC_INTEGER_BITS."""
    bits = getattr(settings, "ARITHMETIC_INTEGER_BITS", DEFAULT_INTEGER_BITS)
    try:
        bits = int(bits)
    except (ValueError, TypeError):
        raise ImproperlyConfigured(f"ARITHMETIC_INTEGER_BITS must be an integer, got {bits!r}")
    if not 2 <= bits <= MAX_INTEGER_BITS:
        raise ImproperlyConfigured(
            f"ARITHMETIC_INTEGER_BITS must be between 2 and {MAX_INTEGER_BITS}, got {bits}"
        )
    return bits
