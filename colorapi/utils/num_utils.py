import math
from numbers import Real
from typing import Any, Optional

from ..types.defaults import DEFAULT_PRECISION

# Anything smaller prints as 0; conversion round-off lives down here
_ZERO_THRESHOLD = 1e-10


def is_real_number(value: Any) -> bool:
    """True for ints, floats and numpy scalars; False for bools."""
    return isinstance(value, Real) and not isinstance(value, bool)


def format_number(value: Optional[float], precision: int = DEFAULT_PRECISION) -> str:
    """
    Format a number for CSS output.

    Keeps ``precision`` significant digits, drops trailing zeros and never
    uses exponent notation. ``None`` becomes ``none``.

    >>> format_number(255.0)
    '255'
    >>> format_number(1 / 3)
    '0.33333'
    """
    if value is None:
        return "none"
    value = float(value)
    if math.isnan(value):
        return "calc(NaN)"
    if math.isinf(value):
        return "calc(infinity)" if value > 0 else "calc(-infinity)"
    if abs(value) < _ZERO_THRESHOLD:
        return "0"

    digits = precision - int(math.floor(math.log10(abs(value)))) - 1
    rounded = round(value, digits)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.{max(digits, 0)}f}".rstrip("0").rstrip(".")
