"""Reading the grid map: cells, obstacles and the player's starting spot."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable

from wolfcast.geometry import Point
from wolfcast.textutil import atoi


class MapError(Exception):
    """Raised when a map cannot be read or is not usable."""


@dataclass
class Cell:
    """One map square: its coordinates and its obstacle code (0 is empty)."""

    x: float
    y: float
    obs: int


@dataclass
class GameMap:
    """A rectangular grid of cells plus the start position and heading."""

    cells: list[list[Cell]]
    width: int
    height: int
    wall_size: float
    start: Point | None = None
    start_angle: float = 0.0
    _scaled: bool = field(default=False, repr=False, compare=False)

    def scale(self) -> None:
        """Multiply every cell's coordinates by the wall size."""
        for row in self.cells:
            for cell in row:
                cell.x *= self.wall_size
                cell.y *= self.wall_size
        self._scaled = True

    def blocked(self, col: int, row: int) -> bool:
        """True if the cell holds an obstacle or lies outside the grid."""
        if row < 0 or row >= len(self.cells):
            return True
        cells = self.cells[row]
        if col < 0 or col >= len(cells):
            return True
        return cells[col].obs != 0


def _blank(ch: str) -> bool:
    return ch <= " "


def count_columns(line: str) -> int:
    """Count the whitespace-separated tokens in a map line."""
    return sum(
        1
        for cur, nxt in zip(line, line[1:] + "\0")
        if not _blank(cur) and _blank(nxt)
    )


def _token_length(text: str) -> int:
    for length, ch in enumerate(text):
        if _blank(ch):
            return length
    return len(text)


def _parse_row(row: int, line: str, width: int):
    """Return the row's cells and any start markers found as (col, angle)."""
    cells = []
    starts = []
    k = 0
    for col in range(width):
        while k < len(line) and _blank(line[k]):
            k += 1
        rest = line[k:]
        if rest.startswith("a"):
            starts.append((col, atoi(rest[1:])))
            obs = 0
        else:
            obs = atoi(rest)
        cells.append(Cell(float(col), float(row), obs))
        k += _token_length(rest) + 1
    return cells, starts


def parse_map(lines: Iterable[str], wall_size: float) -> GameMap:
    """Build a map from its text lines.

    Each token is an obstacle code; a token ``a<angle>`` marks an empty cell
    where the player starts, facing ``angle`` degrees. Short rows are padded
    with empty cells up to the widest row.
    """
    if int(wall_size) <= 0:
        raise MapError(f"wall size must be at least 1, got {wall_size!r}")
    rows = list(lines)
    width = max((count_columns(line) for line in rows), default=0)
    game_map = GameMap(cells=[], width=width, height=len(rows), wall_size=wall_size)
    for row, line in enumerate(rows):
        cells, starts = _parse_row(row, line, width)
        game_map.cells.append(cells)
        for col, angle in starts:
            game_map.start = Point(
                col * wall_size + wall_size / 2, row * wall_size + wall_size / 2
            )
            game_map.start_angle = angle
    return game_map


def load_map(path: str | os.PathLike, wall_size: float) -> GameMap:
    """Read and parse a map file."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except IsADirectoryError as exc:
        raise MapError(f"{path} is a directory") from exc
    except OSError as exc:
        raise MapError(f"cannot open {path}: {exc.strerror}") from exc
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return parse_map(lines, wall_size)