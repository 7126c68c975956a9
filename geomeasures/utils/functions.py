"""Module for miscellaneous multi-use functions"""

__all__ = ['is_finite_number', 'normalize_radians']

import math
from numbers import Real
from typing import Any

_TWO_PI = 2 * math.pi


def is_finite_number(value: Any) -> bool:
    """
    Test whether a value is a real number that is neither NaN nor infinite.

    Booleans are rejected even though Python treats them as integers.

    Args:
        value:
            The value to test

    Returns:
        bool
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False

    return math.isfinite(value)


def normalize_radians(angle: float) -> float:
    """
    Wraps an angle in radians into [0, 2π).

    Args:
        angle:
            The angle, in radians

    Returns:
        float
    """
    angle = angle % _TWO_PI

    # A tiny negative angle wraps to a float equal to 2π
    if angle >= _TWO_PI:
        return 0.0

    return angle
