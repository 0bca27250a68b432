"""Scalar helpers shared by the numeric kernel.

All functions are pure and guard divisions with relative-magnitude tests
instead of comparing denominators bitwise to zero.
"""

import math

from rootkernel.config.settings import ToleranceConfig

_TOLERANCES = ToleranceConfig()

LARGE_FRACTION_RESULT = _TOLERANCES.large_fraction_result
SMALL_METRIC_DISTANCE = _TOLERANCES.small_metric_distance


def conditional_divide_fraction(numerator: float, denominator: float) -> float | None:
    """Divide when the quotient is a plausible fraction.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        ``numerator / denominator``, or None if the quotient would exceed
        ``LARGE_FRACTION_RESULT`` in magnitude (including a zero divisor).

    Examples:
        >>> conditional_divide_fraction(1.0, 4.0)
        0.25
        >>> conditional_divide_fraction(1.0, 0.0) is None
        True
    """
    if abs(denominator) * LARGE_FRACTION_RESULT > abs(numerator):
        return numerator / denominator
    return None


def is_in_01(x: float, apply_01: bool = True) -> bool:
    """Test if x is in the closed interval [0, 1]. With ``apply_01=False`` accept all x."""
    return 0.0 <= x <= 1.0 if apply_01 else True


def hypotenuse_xyz(x: float, y: float, z: float) -> float:
    return math.sqrt(x * x + y * y + z * z)


def cross_product_xyxy(ux: float, uy: float, vx: float, vy: float) -> float:
    return ux * vy - uy * vx


def max_abs_xy(x: float, y: float) -> float:
    return max(abs(x), abs(y))
