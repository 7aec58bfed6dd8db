"""Common floating point helpers and constants."""

from __future__ import annotations

import random
from typing import TypeVar

PI = 3.14159265359
"""The value of pi."""

PI_OVER2 = PI / 2
"""Pi divided by two."""

PI_OVER4 = PI / 4
"""Pi divided by four."""

INVERSE_PI = 1.0 / PI
"""One divided by pi."""

NORMALIZE_PI_OVER4 = 0.70710678119
"""Each component of a unit vector at an angle of pi/4."""

INVERSE_180 = 1.0 / 180
"""One divided by 180."""

RAND_MAX = 32767
"""Default upper bound for random integers."""

T = TypeVar("T", int, float)


def lerp(start: float, end: float, value: float) -> float:
    """Linearly interpolate between start and end.

    Values below zero give start, values above one give end.
    """
    if value < 0:
        return start
    if value > 1:
        return end
    return start + (end - start) * value


def get_random_int(minimum: int = 0, maximum: int = RAND_MAX) -> int:
    """Return a random integer between minimum and maximum, both inclusive."""
    if maximum < minimum:
        raise ValueError(f"maximum ({maximum}) is less than minimum ({minimum})")
    return random.randint(minimum, maximum)


def get_random_float() -> float:
    """Return a random number between zero and one."""
    return random.random()


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI * INVERSE_180


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180 * INVERSE_PI


def clamp(minimum: T, maximum: T, value: T) -> T:
    """Restrict value to the range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def is_in_range(minimum: T, maximum: T, value: T) -> bool:
    """Return True if value lies within [minimum, maximum]."""
    return minimum <= value <= maximum