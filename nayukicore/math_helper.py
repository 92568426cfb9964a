"""Small math helpers: random numbers, interpolation, polar angles, extents."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import TypeVar

__all__ = [
    "PI",
    "INFINITY",
    "Extent2D",
    "rand_f",
    "rand_int",
    "lerp",
    "clamp",
    "angle_from_xy",
    "rand_unit_vec3",
]

PI = 3.1415926535
INFINITY = 3.4028234663852886e38

_U32_LIMIT = 2**32

T = TypeVar("T")


@dataclass(frozen=True)
class Extent2D:
    """A width and height in unsigned 32-bit units."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not 0 <= value < _U32_LIMIT:
                raise ValueError(f"{name} must be in [0, 2**32), got {value}")


def rand_f(a: float = 0.0, b: float = 1.0) -> float:
    """Return a random float in [a, b)."""
    return a + random.random() * (b - a)


def rand_int(a: int, b: int) -> int:
    """Return a random integer in [a, b]."""
    return random.randint(a, b)


def lerp(a, b, t: float):
    """Linear interpolation between ``a`` and ``b``."""
    return a + (b - a) * t


def clamp(x: T, low: T, high: T) -> T:
    """Limit ``x`` to the range [low, high]."""
    if x < low:  # type: ignore[operator]
        return low
    if x > high:  # type: ignore[operator]
        return high
    return x


def angle_from_xy(x: float, y: float) -> float:
    """Return the polar angle of the point (x, y) in [0, 2*PI)."""
    if x >= 0.0:
        if x == 0.0:
            if y == 0.0:
                return math.nan
            ratio = math.copysign(math.inf, y) * math.copysign(1.0, x)
        else:
            ratio = y / x
        theta = math.atan(ratio)
        if theta < 0.0:
            theta += 2.0 * PI
        return theta
    return math.atan(y / x) + PI


def rand_unit_vec3() -> tuple[float, float, float]:
    """Return a random unit vector, uniformly distributed over the sphere."""
    while True:
        v = (rand_f(-1.0, 1.0), rand_f(-1.0, 1.0), rand_f(-1.0, 1.0))
        length = math.sqrt(sum(c * c for c in v))
        if length > 1.0 or length == 0.0:
            continue
        return (v[0] / length, v[1] / length, v[2] / length)