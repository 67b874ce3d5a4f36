import pytest

from wolfcast.geometry import Point
from wolfcast.mapfile import parse_map
from wolfcast.player import Direction, Player

WALL = 64
ROOM = [
    "1 1 1 1 1",
    "1 0 0 0 1",
    "1 0 a0 0 1",
    "1 0 0 0 1",
    "1 1 1 1 1",
]


@pytest.fixture
def room():
    return parse_map(ROOM, WALL)


def _player(room):
    return Player(Point(room.start.x, room.start.y), room.start_angle)


def test_forward_moves_full_run(room):
    player = _player(room)
    before = Point(player.position.x, player.position.y)
    player.move(Direction.UP, 4, room)
    assert player.position.x == pytest.approx(before.x + 4)
    assert player.position.y == before.y


def test_backward_moves_half_run(room):
    player = _player(room)
    before_x = player.position.x
    player.move(Direction.DOWN, 4, room)
    assert player.position.x == pytest.approx(before_x - 4 / 2)


def test_strafe_left_and_right_are_opposite(room):
    left = _player(room)
    right = _player(room)
    start_y = left.position.y
    left.move(Direction.LEFT, 4, room)
    right.move(Direction.RIGHT, 4, room)
    assert left.position.y < start_y < right.position.y
    assert left.position.y - start_y == pytest.approx(start_y - right.position.y)
    assert left.position.x == pytest.approx(room.start.x, abs=1e-3)


def test_wall_stops_movement(room):
    player = Player(Point(250, room.start.y), 0)
    player.move(Direction.UP, 8.5, room)
    assert player.position.x == 250


def test_blocked_axis_does_not_stop_the_other(room):
    player = Player(Point(254, room.start.y), 45)
    player.move(Direction.UP, 8, room)
    assert player.position.x == 254
    assert player.position.y < room.start.y


def test_only_code_one_blocks_movement():
    game_map = parse_map(["1 1 1 1", "1 0 2 1", "1 1 1 1"], WALL)
    player = Player(Point(120, 96), 0)
    player.move(Direction.UP, 10, game_map)
    assert player.position.x == pytest.approx(120 + 10)