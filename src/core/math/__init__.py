"""
Core math modules

Численные примитивы калькулятора с гарантией стабильности.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_DIVISOR,
    EPS_INTEGER_SNAP,
    SIGNIFICANT_DIGITS_DEFAULT,
    # Divisor guard
    is_degenerate_divisor,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_near_integer,
    nearest_integer,
    # Validation
    validate_in_range,
    validate_positive,
)

__all__ = [
    "EPS_DIVISOR",
    "EPS_INTEGER_SNAP",
    "SIGNIFICANT_DIGITS_DEFAULT",
    "is_degenerate_divisor",
    "is_valid_float",
    "is_near_integer",
    "nearest_integer",
    "validate_in_range",
    "validate_positive",
]
