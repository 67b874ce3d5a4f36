"""The per-frame game loop: apply held keys, draw the view, label the screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from wolfcast.controls import InputState
from wolfcast.geometry import Point
from wolfcast.mapfile import GameMap
from wolfcast.player import Direction, Player
from wolfcast.render import Image, Texture, draw_crosshair, render_view

TEXT_COLOR = 0xB74401
WALK_SPEED = 4.0
RUN_SPEED = 8.5
TURN_STEP = 3.5
LOOK_STEP = 50

_HELP = (
    (50, 50, "Up:     W"),
    (50, 70, "Down:   S"),
    (50, 90, "Right:  D"),
    (50, 110, "Down:   S"),
    (190, 50, "Turn Left:   <-"),
    (190, 70, "Turn Right:  ->"),
    (190, 90, "Run:         Shift"),
)


def compass_heading(angle: float) -> str | None:
    """Name the compass quarter an angle in degrees points to."""
    if 45 < angle <= 135:
        return "North"
    if 135 < angle <= 225:
        return "West"
    if 225 < angle <= 315:
        return "South"
    if 315 < angle <= 360 or 0 <= angle <= 45:
        return "East"
    return None


@dataclass
class Game:
    """Everything one running game needs from frame to frame."""

    game_map: GameMap
    textures: Sequence[Texture]
    image: Image
    player: Player | None = None
    keys: InputState = field(default_factory=InputState)
    mid: int | None = None

    def __post_init__(self) -> None:
        if len(self.textures) < 3:
            raise ValueError("need wall, aimed weapon and held weapon textures")
        if self.player is None:
            start = self.game_map.start
            if start is None:
                raise ValueError("the map has no start position")
            self.player = Player(Point(start.x, start.y), float(self.game_map.start_angle))
        if self.mid is None:
            self.mid = self.image.height // 2

    def update(self) -> None:
        """Move, turn and tilt according to the held keys."""
        keys, player = self.keys, self.player
        speed = RUN_SPEED if keys.run else WALK_SPEED
        moves = (
            (keys.up, Direction.UP),
            (keys.down, Direction.DOWN),
            (keys.left, Direction.LEFT),
            (keys.right, Direction.RIGHT),
        )
        for held, direction in moves:
            if held:
                player.move(direction, speed, self.game_map)
        if keys.look_up:
            self.mid += LOOK_STEP
        if keys.look_down:
            self.mid -= LOOK_STEP
        if keys.turn_left:
            player.angle += TURN_STEP
        if keys.turn_right:
            player.angle -= TURN_STEP
        if player.angle >= 360:
            player.angle -= 360
        if player.angle < 0:
            player.angle += 360
        if self.mid > self.image.height - 1:
            self.mid = self.image.height - 2
        if self.mid < 50:
            self.mid = 51

    def frame(self) -> Image:
        """Advance one tick and redraw the image."""
        self.update()
        self.image.clear()
        render_view(
            self.image,
            self.game_map,
            self.player,
            self.textures,
            self.mid,
            self.keys.aim,
            self.keys.up,
        )
        if not self.keys.aim:
            draw_crosshair(self.image)
        return self.image

    def overlay(self) -> list[tuple[int, int, int, str]]:
        """Return the on-screen labels as (x, y, color, text)."""
        half = self.image.width // 2
        player = self.player
        labels = [(x, y, TEXT_COLOR, text) for x, y, text in _HELP]
        labels.append((half - 30, 70, TEXT_COLOR, str(int(player.position.y))))
        labels.append((half + 20, 70, TEXT_COLOR, str(int(player.position.x))))
        labels.append((half + 70, 70, TEXT_COLOR, str(int(player.angle))))
        heading = compass_heading(player.angle)
        if heading is not None:
            labels.append((half, 50, TEXT_COLOR, heading))
        return labels