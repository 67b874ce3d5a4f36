"""Drawing the view: floor, ceiling, textured walls, weapon and crosshair."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from wolfcast.geometry import deg_to_rad
from wolfcast.mapfile import GameMap
from wolfcast.player import Player
from wolfcast.raycast import cast_ray

CEILING_SHADE = 70
FLOOR_SHADE = 50
CROSSHAIR_COLOR = (0x01, 0x44, 0xB7)
FIELD_OF_VIEW = 60.0
AIM_FIELD_OF_VIEW = 40.0
AIM_ZOOM = 1.5
_BOB_STEP = 0.14


@dataclass
class Image:
    """A frame buffer of 4-byte pixels stored blue, green, red, padding."""

    width: int
    height: int
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        self.data = bytearray(self.width * self.height * 4)

    @property
    def size_line(self) -> int:
        """Bytes per row."""
        return self.width * 4

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the (blue, green, red) bytes at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        offset = x * 4 + y * self.size_line
        return self.data[offset], self.data[offset + 1], self.data[offset + 2]

    def clear(self) -> None:
        """Set every byte to zero."""
        self.data[:] = bytes(len(self.data))

    def _put(self, x: float, y: float, blue: float, green: float, red: float) -> None:
        col, row = int(x), int(y)
        if not (0 <= col < self.width and 0 <= row < self.height):
            return
        offset = col * 4 + row * self.size_line
        self.data[offset] = int(blue) % 256
        self.data[offset + 1] = int(green) % 256
        self.data[offset + 2] = int(red) % 256


@dataclass(frozen=True)
class Texture:
    """A read-only picture of 4-byte pixels, laid out like an Image."""

    width: int
    height: int
    data: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"texture size must be positive, got {self.width}x{self.height}"
            )
        if len(self.data) < self.width * self.height * 4:
            raise ValueError("texture data is shorter than width * height * 4 bytes")

    def _texel(self, x: int, y: int) -> tuple[int, int, int]:
        offset = (x + y * self.width) * 4
        return self.data[offset], self.data[offset + 1], self.data[offset + 2]


def _tint(side: str, alpha: float) -> int:
    if side == "h":
        if 0 <= alpha < 180:
            return 0x0066FF
        if alpha >= 180:
            return 0xAA6699
        return 0
    if side == "v":
        if 90 <= alpha < 270:
            return 0xFF0033
        if alpha < 90 or alpha >= 270:
            return 0xFFFF00
    return 0


def draw_floor_ceiling(image: Image, x: int, mid: float, height: float) -> None:
    """Fill column ``x`` above and below a wall of ``height`` centred on ``mid``."""
    top = 0
    while top < mid - height / 2 and top < image.height:
        image._put(x, top, CEILING_SHADE, CEILING_SHADE, CEILING_SHADE)
        top += 1
    bottom = image.height - 1
    while bottom > mid + height / 2 and bottom >= 0:
        image._put(x, bottom, FLOOR_SHADE, FLOOR_SHADE, FLOOR_SHADE)
        bottom -= 1


def draw_column(
    image: Image,
    x: int,
    mid: float,
    height: float,
    texture: Texture,
    tex_x: int,
    side: str,
    alpha: float,
) -> None:
    """Draw one textured wall slice, tinted by which face the ray struck."""
    tint = _tint(side, alpha)
    shades = (0.1 * (tint & 0xFF), 0.1 * ((tint >> 8) & 0xFF), 0.1 * ((tint >> 16) & 0xFF))

    def plot(y: float, ty: float) -> None:
        b, g, r = texture._texel(int(tex_x), int(ty))
        image._put(x, y, b + shades[0], g + shades[1], r + shades[2])

    y = mid
    ty = texture.height / 2
    while y <= image.height - 1 and y - mid < height / 2:
        ty = min(ty, texture.height - 1)
        plot(y, ty)
        ty += texture.height / height
        y += 1
    y = mid
    ty = texture.height / 2
    while y >= 0 and y - mid > -height / 2:
        ty = max(ty, 0)
        plot(y, ty)
        ty -= texture.height / height
        y -= 1


def draw_weapon(image: Image, texture: Texture, aiming: bool, bob: float) -> None:
    """Overlay the weapon sprite; its first pixel's blue byte is the transparent key.

    The held weapon sits right of centre and is lifted by the walking ``bob``;
    the aimed one sits centred higher up and ignores ``bob``.
    """
    step = 2 * 120 / min(image.height, image.width)
    key = texture.data[0]
    if aiming:
        row = image.height // 2 - 40
        lift = 0
        first_col = int(image.width // 2 - (texture.width * image.height) / 480 - 5)
    else:
        row = image.height // 2 + image.height // 15
        lift = int(math.sin(bob) * math.sin(bob) * 30)
        first_col = image.width // 2
    ty = 0.0
    while row - lift < image.height - 1 and ty < texture.height:
        col = first_col
        tx = 0.0
        while col < image.width - 1 and tx < texture.width:
            b, g, _ = texture._texel(int(tx), int(ty))
            if b != key:
                image._put(col, row - lift, b, g, g)
            tx += step
            col += 1
        ty += step
        row += 1


def draw_crosshair(image: Image) -> None:
    """Draw a cross of two dashed arms with a dot in the middle of the image."""
    cx, cy = image.width // 2, image.height // 2
    for offset in range(10, 2, -1):
        image._put(cx - offset, cy, *CROSSHAIR_COLOR)
        image._put(cx + offset, cy, *CROSSHAIR_COLOR)
        image._put(cx, cy - offset, *CROSSHAIR_COLOR)
        image._put(cx, cy + offset, *CROSSHAIR_COLOR)
    image._put(cx, cy, *CROSSHAIR_COLOR)


def _texture_column(coord: float, tex_width: int, wall_size: float) -> int:
    if not math.isfinite(coord):
        return 0
    return int(int(coord) * tex_width / wall_size) % int(tex_width)


def render_view(
    image: Image,
    game_map: GameMap,
    player: Player,
    textures: Sequence[Texture],
    mid: float,
    aiming: bool,
    walking: bool,
) -> None:
    """Cast one ray per column and draw the scene, then the weapon.

    ``textures`` holds the wall, the aimed weapon and the held weapon, in
    that order. Walking advances the player's bob; standing resets it.
    """
    if len(textures) < 3:
        raise ValueError("need wall, aimed weapon and held weapon textures")
    wall, aimed, held = textures[0], textures[1], textures[2]
    player.bob = player.bob + _BOB_STEP if walking else 0.0
    alpha = player.angle + FIELD_OF_VIEW / 2
    if aiming:
        sweep = AIM_FIELD_OF_VIEW
        alpha -= 10
    else:
        sweep = FIELD_OF_VIEW
    step = sweep / image.width
    projection = image.width / 2 / math.tan(deg_to_rad(FIELD_OF_VIEW / 2))
    for x in range(image.width):
        if alpha >= 360:
            alpha -= 360
        if alpha < 0:
            alpha += 360
        hit = cast_ray(game_map, player.position, alpha)
        distance = hit.distance * math.cos(deg_to_rad(player.angle - alpha))
        if distance == 0:
            height = math.inf
        else:
            height = game_map.wall_size / distance * projection
        if aiming:
            height *= AIM_ZOOM
        coord = hit.point.x if hit.side == "h" else hit.point.y
        tex_x = _texture_column(coord, wall.width, game_map.wall_size)
        draw_floor_ceiling(image, x, mid, height)
        draw_column(image, x, mid, height, wall, tex_x, hit.side, alpha)
        alpha -= step
    draw_weapon(image, aimed if aiming else held, aiming, player.bob)