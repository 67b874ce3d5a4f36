import pytest

from wolfcast.mapfile import MapError, count_columns, load_map, parse_map

WALL = 64
ROOM = ["1 1 1", "1 a90 1", "1 1 1"]


@pytest.mark.parametrize("n", range(5))
def test_count_columns_single_spaces(n):
    assert count_columns(" ".join(["7"] * n)) == n


@pytest.mark.parametrize("n", range(1, 4))
def test_count_columns_mixed_whitespace(n):
    assert count_columns("  " + "\t".join(["12"] * n) + "   ") == n


def test_parse_map_dimensions():
    game_map = parse_map(ROOM, WALL)
    assert game_map.width == 3
    assert game_map.height == len(ROOM)


def test_parse_map_start_marker():
    game_map = parse_map(ROOM, WALL)
    assert game_map.start_angle == 90
    assert int(game_map.start.x // WALL) == 1
    assert int(game_map.start.y // WALL) == 1
    assert game_map.start.x % WALL == WALL / 2
    assert game_map.cells[1][1].obs == 0
    assert game_map.cells[0][0].obs == 1


def test_short_rows_are_padded_with_empty_cells():
    game_map = parse_map(["1 1 1", "2"], WALL)
    assert [cell.obs for cell in game_map.cells[1]] == [2, 0, 0]


def test_negative_codes_parse():
    game_map = parse_map(["-1 3"], WALL)
    assert [cell.obs for cell in game_map.cells[0]] == [-1, 3]


def test_map_without_start_has_no_position():
    game_map = parse_map(["1 1", "1 1"], WALL)
    assert game_map.start is None
    assert game_map.width == 2


def test_scale_multiplies_coordinates():
    game_map = parse_map(ROOM, WALL)
    game_map.scale()
    cell = game_map.cells[2][1]
    assert cell.x == 1 * WALL
    assert cell.y == 2 * WALL


def test_blocked_inside_and_outside():
    game_map = parse_map(ROOM, WALL)
    assert game_map.blocked(0, 0)
    assert not game_map.blocked(1, 1)
    assert game_map.blocked(-1, 1)
    assert game_map.blocked(1, len(ROOM))


def test_zero_wall_size_rejected():
    with pytest.raises(MapError):
        parse_map(ROOM, 0)


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "level.map"
    path.write_text("\n".join(ROOM) + "\n")
    game_map = load_map(path, WALL)
    assert game_map.height == len(ROOM)
    assert game_map.start == parse_map(ROOM, WALL).start


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "absent.map", WALL)


def test_load_map_directory(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path, WALL)