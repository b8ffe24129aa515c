"""
Core math modules для BigInteger

Беззнаковая арифметика над десятичными разрядами (magnitude).
"""

# Digits (magnitude arithmetic)
from src.core.math.digits import (
    # Constants
    DIGIT_BASE,
    ZERO_DIGITS,
    # Normalization
    digits_from_int,
    is_zero_magnitude,
    strip_leading_zeros,
    # Arithmetic
    add_digits,
    multiply_digits,
    subtract_digits,
    # Rendering
    render_digits,
)

__all__ = [
    # Digits — Constants
    "DIGIT_BASE",
    "ZERO_DIGITS",
    # Digits — Normalization
    "digits_from_int",
    "is_zero_magnitude",
    "strip_leading_zeros",
    # Digits — Arithmetic
    "add_digits",
    "multiply_digits",
    "subtract_digits",
    # Digits — Rendering
    "render_digits",
]
