import pytest

from practicekit.dungeon_logic import (
    LevelError,
    Player,
    Status,
    Tile,
    create_map,
    do_monster_attack,
    do_player_move,
    get_direction,
    load_level,
    resize_map,
)

LEVEL = "3 4\n1 1\n- - - -\n- - $ -\n+ - - !\n"


def write_level(tmp_path, text, name="level1.txt"):
    path = tmp_path / name
    path.write_text(text)
    return path


def make_grid(*rows):
    return [[Tile(ch) for ch in row] for row in rows]


def count(grid, tile):
    return sum(cell == tile for row in grid for cell in row)


def test_load_level_places_player(tmp_path):
    grid, player = load_level(write_level(tmp_path, LEVEL))
    assert len(grid) == 3
    assert all(len(row) == 4 for row in grid)
    assert (player.row, player.col, player.treasure) == (1, 1, 0)
    assert grid[1][1] == Tile.PLAYER
    assert grid[1][2] == Tile.TREASURE
    assert grid[2][0] == Tile.PILLAR
    assert grid[2][3] == Tile.EXIT
    assert count(grid, Tile.PLAYER) == 1


def test_load_level_without_spaces_matches(tmp_path):
    spaced, _ = load_level(write_level(tmp_path, LEVEL, "a.txt"))
    compact, player = load_level(
        write_level(tmp_path, "3 4\n1 1\n----\n--$-\n+--!\n", "b.txt")
    )
    assert compact == spaced
    assert (player.row, player.col) == (1, 1)


def test_load_level_missing_file(tmp_path):
    with pytest.raises(LevelError):
        load_level(tmp_path / "nothing_here.txt")


@pytest.mark.parametrize(
    "text",
    [
        "x 4\n1 1\n----\n--$-\n+--!\n",
        "0 4\n0 0\n",
        "3 -4\n0 0\n",
        "1000000 1\n0 0\n",
        "999999 999999\n0 0\n",
        "3 4\n3 1\n----\n--$-\n+--!\n",
        "3 4\n1 -1\n----\n--$-\n+--!\n",
        "3 4\n1 1\n----\n--Z-\n+--!\n",
        "3 4\n1 1\n----\n--$-\n+---\n",
        "3 4\n1 1\n----\n--$-\n+--!\n-\n",
        "3 4\n1 1\n----\n--$-\n+--\n",
        "3 4\n2 0\n----\n--$-\n+--!\n",
        "3 4\n1 1\n",
    ],
)
def test_load_level_rejects_invalid_files(tmp_path, text):
    with pytest.raises(LevelError):
        load_level(write_level(tmp_path, text))


def test_load_level_accepts_door_only(tmp_path):
    grid, _ = load_level(write_level(tmp_path, "1 2\n0 0\n- ?\n"))
    assert grid == [[Tile.PLAYER, Tile.DOOR]]


@pytest.mark.parametrize("key", ["w", "a", "s", "d", "e", "x"])
def test_get_direction_moves_at_most_one_step(key):
    row, col = 2, 3
    new_row, new_col = get_direction(key, row, col)
    assert abs(new_row - row) + abs(new_col - col) <= 1


def test_get_direction_each_key():
    row, col = 2, 3
    assert get_direction("w", row, col) == (row - 1, col)
    assert get_direction("s", row, col) == (row + 1, col)
    assert get_direction("a", row, col) == (row, col - 1)
    assert get_direction("d", row, col) == (row, col + 1)
    assert get_direction("e", row, col) == (row, col)


def test_get_direction_blocks_negative_indices():
    assert get_direction("w", 0, 3) == (0, 3)
    assert get_direction("a", 2, 0) == (2, 0)


def test_create_map_is_all_open_and_rows_independent():
    grid = create_map(2, 5)
    assert len(grid) == 2
    assert all(len(row) == 5 for row in grid)
    assert count(grid, Tile.OPEN) == 2 * 5
    grid[0][0] = Tile.PLAYER
    assert grid[1][0] == Tile.OPEN


def test_resize_map_copies_quadrants_without_player():
    grid = make_grid("o--", "--$")
    bigger = resize_map(grid)
    assert len(bigger) == 2 * 2
    assert all(len(row) == 2 * 3 for row in bigger)
    assert count(bigger, Tile.PLAYER) == 1
    assert bigger[0][0] == Tile.PLAYER
    assert bigger[0][3] == Tile.OPEN
    assert bigger[2][0] == Tile.OPEN
    assert bigger[2][3] == Tile.OPEN
    assert count(bigger, Tile.TREASURE) == 4 * count(grid, Tile.TREASURE)
    assert bigger[1][2] == bigger[1][5] == bigger[3][2] == bigger[3][5] == Tile.TREASURE


def test_resize_map_empty_raises():
    with pytest.raises(ValueError):
        resize_map([])


def test_move_onto_open_tile():
    grid = make_grid("o-", "--")
    player = Player(0, 0)
    assert do_player_move(grid, player, 0, 1) == Status.MOVE
    assert (player.row, player.col) == (0, 1)
    assert grid == make_grid("-o", "--")


def test_move_out_of_bounds_stays():
    grid = make_grid("o-", "--")
    player = Player(0, 0)
    assert do_player_move(grid, player, 2, 0) == Status.STAY
    assert (player.row, player.col) == (0, 0)
    assert grid == make_grid("o-", "--")


@pytest.mark.parametrize("blocker", ["+", "M"])
def test_move_into_blocker_stays(blocker):
    grid = make_grid("o" + blocker)
    player = Player(0, 0)
    assert do_player_move(grid, player, 0, 1) == Status.STAY
    assert (player.row, player.col) == (0, 0)
    assert grid == make_grid("o" + blocker)


def test_move_onto_treasure_counts_it():
    grid = make_grid("o$")
    player = Player(0, 0)
    assert do_player_move(grid, player, 0, 1) == Status.TREASURE
    assert player.treasure == 1
    assert grid == make_grid("-o")


@pytest.mark.parametrize("tile, status", [("@", Status.AMULET), ("?", Status.LEAVE)])
def test_move_onto_amulet_or_door(tile, status):
    grid = make_grid("o" + tile)
    player = Player(0, 0)
    assert do_player_move(grid, player, 0, 1) == status
    assert grid[0][1] == Tile.PLAYER


def test_exit_needs_treasure():
    grid = make_grid("o!")
    player = Player(0, 0)
    assert do_player_move(grid, player, 0, 1) == Status.STAY
    assert grid == make_grid("o!")
    player.treasure = 1
    assert do_player_move(grid, player, 0, 1) == Status.ESCAPE
    assert (player.row, player.col) == (0, 1)


def test_monsters_step_toward_player():
    grid = make_grid("--M--", "-----", "M-o-M", "-----", "--M--")
    player = Player(2, 2)
    assert do_monster_attack(grid, player) is False
    assert grid == make_grid("-----", "--M--", "-MoM-", "--M--", "-----")


def test_pillar_blocks_line_of_sight():
    grid = make_grid("M+o")
    player = Player(0, 2)
    assert do_monster_attack(grid, player) is False
    assert grid == make_grid("M+o")


def test_adjacent_monster_catches_player():
    grid = make_grid("Mo-")
    player = Player(0, 1)
    assert do_monster_attack(grid, player) is True
    assert grid[0][1] == Tile.MONSTER
    assert grid[0][0] == Tile.OPEN


def test_monster_attack_on_empty_grid():
    assert do_monster_attack([], Player()) is False