"""Trigonometry in degrees.

The sunrise equation is written in degrees throughout, so these wrappers
convert at the boundary and keep every step of the calculator readable.
"""

from __future__ import annotations

import math


def degree_to_radian(x: float) -> float:
    return (math.pi / 180.0) * x


def radian_to_degree(x: float) -> float:
    return (180.0 / math.pi) * x


def degree_sin(x: float) -> float:
    return math.sin(degree_to_radian(x))


def degree_cos(x: float) -> float:
    return math.cos(degree_to_radian(x))


def degree_tan(x: float) -> float:
    return math.tan(degree_to_radian(x))


def degree_asin(x: float) -> float:
    return radian_to_degree(math.asin(x))


def degree_acos(x: float) -> float:
    return radian_to_degree(math.acos(x))


def degree_atan(x: float) -> float:
    return radian_to_degree(math.atan(x))


def normalize_range(value: float, maximum: float) -> float:
    """Wrap a value into [0, maximum) by repeated addition/subtraction.

    Args:
        value: Angle in degrees or time in hours
        maximum: Length of the range (360 for degrees, 24 for hours)

    Returns:
        The equivalent value in [0, maximum)

    Raises:
        ValueError: If value is not finite or maximum is not positive
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot normalize non-finite value: {value}")
    if not maximum > 0:
        raise ValueError(f"Range maximum must be positive, got {maximum}")

    # The calculator only feeds in small multiples of the range; anything
    # larger is reduced first so the loops below stay short.
    if abs(value) >= maximum * 1000:
        value = math.fmod(value, maximum)

    while value < 0:
        value += maximum

    while value >= maximum:
        value -= maximum

    return value
