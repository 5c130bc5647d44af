"""
Core math modules

Целочисленные примитивы фиксированной точки.

balance_math импортируется напрямую (src.core.math.balance_math): модуль
зависит от domain.Balance, а domain зависит от fixed_point.
"""

# Fixed Point
from src.core.math.fixed_point import (
    # Scale and word bounds
    BASE,
    MAX_UINT120,
    MAX_UINT256,
    MAX_UINT512,
    # Exceptions
    ArithmeticOverflowError,
    # Checked arithmetic
    check_word,
    checked_mul,
    to_base,
    # Fractions
    get_fraction,
    get_fraction_round_up,
    # Widened comparison
    mul_lt,
)

__all__ = [
    # Fixed Point — Constants
    "BASE",
    "MAX_UINT120",
    "MAX_UINT256",
    "MAX_UINT512",
    # Fixed Point — Exceptions
    "ArithmeticOverflowError",
    # Fixed Point — Functions
    "check_word",
    "checked_mul",
    "to_base",
    "get_fraction",
    "get_fraction_round_up",
    "mul_lt",
]
