"""Numeric coercion helpers"""

import math
from typing import Any


def to_finite(value: Any, default: float = 0.0) -> float:
    """Return value as a float, or default when missing, malformed or non-finite"""
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def non_negative(value: Any) -> float:
    """Finite value floored at zero"""
    return max(0.0, to_finite(value))
