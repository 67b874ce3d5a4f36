"""Planar points, angle conversion and grid stepping for the ray caster."""

from __future__ import annotations

import math
from dataclasses import dataclass

_PI = 3.14159


@dataclass
class Point:
    """A point or vector in map coordinates."""

    x: float
    y: float


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians using the engine's fixed value of pi."""
    return _PI * degrees / 180


def cell_of(point: Point, wall_size: float) -> Point:
    """Return the fractional grid cell coordinates containing ``point``."""
    size = int(wall_size)
    if size <= 0:
        raise ValueError(f"wall size must be at least 1, got {wall_size!r}")
    return Point(point.x / size, point.y / size)


def _divide(num: float, den: float) -> float:
    """Divide like IEEE floats do: a zero divisor gives an infinity or NaN."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def step_increment(angle: float, axis: str, wall_size: float) -> Point:
    """Return the step between successive grid-line crossings of a ray.

    ``axis`` is ``"h"`` for horizontal grid lines and ``"v"`` for vertical
    ones. Angles are in degrees, counter-clockwise, with y growing downward.
    """
    if axis == "h":
        if angle in (90, 270):
            x = 0.0
        else:
            x = _divide(wall_size, math.tan(deg_to_rad(angle)))
        if 180 < angle < 360:
            x = -x
        y = -wall_size if 0 < angle < 180 else wall_size
        return Point(x, y)
    if axis == "v":
        if angle in (0, 180):
            y = 0.0
        else:
            y = wall_size * -math.tan(deg_to_rad(angle))
        if 90 < angle < 270:
            y = -y
        x = -wall_size if 90 < angle < 270 else wall_size
        return Point(x, y)
    raise ValueError(f"axis must be 'h' or 'v', got {axis!r}")