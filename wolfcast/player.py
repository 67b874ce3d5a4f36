"""The player: position, heading and collision-checked movement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from wolfcast.geometry import Point, cell_of, deg_to_rad
from wolfcast.mapfile import GameMap


class Direction(Enum):
    """Movement relative to the player's heading."""

    UP = "u"
    DOWN = "d"
    LEFT = "l"
    RIGHT = "r"


def _is_wall(game_map: GameMap, cell: Point) -> bool:
    col, row = int(cell.x), int(cell.y)
    if not 0 <= row < len(game_map.cells):
        return True
    cells = game_map.cells[row]
    if not 0 <= col < len(cells):
        return True
    return cells[col].obs == 1


@dataclass
class Player:
    """Where the player stands, which way they face, and their walk bob."""

    position: Point
    angle: float = 0.0
    bob: float = 0.0

    def _delta(self, direction: Direction, run: float) -> tuple[float, float]:
        if direction is Direction.UP:
            a = deg_to_rad(self.angle)
            return run * math.cos(a), -run * math.sin(a)
        if direction is Direction.DOWN:
            a = deg_to_rad(self.angle)
            return -run / 2 * math.cos(a), run / 2 * math.sin(a)
        a = deg_to_rad(self.angle + 90)
        if direction is Direction.LEFT:
            return run / 2 * math.cos(a), -run / 2 * math.sin(a)
        return -run / 2 * math.cos(a), run / 2 * math.sin(a)

    def move(self, direction: Direction, run: float, game_map: GameMap) -> None:
        """Step in ``direction``; each axis moves only if it stays off walls.

        Forward steps cover ``run`` units; the others cover half as much.
        """
        dx, dy = self._delta(Direction(direction), run)
        size = game_map.wall_size
        target_x = self.position.x + dx
        if not _is_wall(game_map, cell_of(Point(target_x, self.position.y), size)):
            self.position.x = target_x
        target_y = self.position.y + dy
        if not _is_wall(game_map, cell_of(Point(self.position.x, target_y), size)):
            self.position.y = target_y