"""Casting one ray through the grid to the nearest wall."""

from __future__ import annotations

import math
from dataclasses import dataclass

from wolfcast.geometry import Point, cell_of, deg_to_rad, step_increment
from wolfcast.mapfile import GameMap

_EPSILON = 0.000001


@dataclass(frozen=True)
class Hit:
    """Where a ray met a wall, how far away, and which grid line it crossed."""

    distance: float
    point: Point
    side: str


def _divide(num: float, den: float) -> float:
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _open(game_map: GameMap, cell: Point) -> bool:
    return (
        0 < cell.x < game_map.width
        and 0 < cell.y < game_map.height
        and not game_map.blocked(int(cell.x), int(cell.y))
    )


def _march(game_map: GameMap, start: Point, step: Point) -> Point:
    point = start
    while _open(game_map, cell_of(point, game_map.wall_size)):
        point = Point(point.x + step.x, point.y + step.y)
    return point


def _hit(position: Point, point: Point, side: str) -> Hit:
    distance = math.hypot(position.x - point.x, position.y - point.y)
    return Hit(distance, point, side)


def _horizontal(game_map: GameMap, position: Point, angle: float) -> Hit:
    size = game_map.wall_size
    base = math.floor(position.y / size) * size
    y = base - _EPSILON if 0 < angle < 180 else base + size
    x = position.x + _divide(position.y - y, math.tan(deg_to_rad(angle)))
    step = step_increment(angle, "h", size)
    return _hit(position, _march(game_map, Point(x, y), step), "h")


def _vertical(game_map: GameMap, position: Point, angle: float) -> Hit:
    size = game_map.wall_size
    base = math.floor(position.x / size) * size
    x = base + size if angle < 90 or angle > 270 else base - _EPSILON
    y = position.y + (position.x - x) * math.tan(deg_to_rad(angle))
    step = step_increment(angle, "v", size)
    return _hit(position, _march(game_map, Point(x, y), step), "v")


def cast_ray(game_map: GameMap, position: Point, angle: float) -> Hit:
    """Return the nearer of the horizontal and vertical wall crossings."""
    horizontal = _horizontal(game_map, position, angle)
    vertical = _vertical(game_map, position, angle)
    if horizontal.distance < vertical.distance:
        return horizontal
    return vertical