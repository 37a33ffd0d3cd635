"""Text forms of JSON numbers and literals."""

from __future__ import annotations

import math
import operator

NULL = "null"
TRUE = "true"
FALSE = "false"

# Beyond 17 significant digits every double is already exact.
MAX_FLOAT_PRECISION = 17
DEFAULT_FLOAT_PRECISION = 6


def format_integer(value: int) -> str:
    """Minimal base-10 form: no leading zeros, no plus sign."""
    if isinstance(value, bool):
        raise TypeError("bool is not an integer here, use a JSON boolean")
    return str(operator.index(value))


def format_float(value: float, precision: int = DEFAULT_FLOAT_PRECISION) -> str:
    """
    Render ``value`` with at most ``precision`` significant digits.

    Follows C ``%.*g``: trailing zeros and a dangling point are dropped,
    and exponent form (``1e+06``) is used when the decimal exponent is
    below -4 or not less than ``precision``. A precision of 0 means 1.

    JSON has no spelling for infinities or NaN, so those become ``null``.
    """
    if precision < 0:
        raise ValueError("precision must be >= 0")
    value = float(value)
    if not math.isfinite(value):
        return NULL
    return format(value, f".{precision}g")


def format_bool(value: bool) -> str:
    return TRUE if value else FALSE
