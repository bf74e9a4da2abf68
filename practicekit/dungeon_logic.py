"""Game rules for the dungeon crawler: level loading, movement and monsters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)
MAX_DIMENSION = 999999

INPUT_QUIT = "q"
INPUT_STAY = "e"
MOVE_UP = "w"
MOVE_LEFT = "a"
MOVE_DOWN = "s"
MOVE_RIGHT = "d"

Grid = list  # list[list[Tile]]


class Tile(str, Enum):
    """Symbols that make up a dungeon map."""

    OPEN = "-"
    PLAYER = "o"
    TREASURE = "$"
    AMULET = "@"
    MONSTER = "M"
    PILLAR = "+"
    DOOR = "?"
    EXIT = "!"


class Status(IntEnum):
    """Outcome of a player's turn."""

    STAY = 0
    MOVE = 1
    TREASURE = 2
    AMULET = 3
    LEAVE = 4
    ESCAPE = 5


@dataclass
class Player:
    """Position and treasure count of the adventurer."""

    row: int = 0
    col: int = 0
    treasure: int = 0


class LevelError(Exception):
    """Raised when a level file cannot be loaded."""


_FILE_TILES = frozenset(
    {
        Tile.OPEN.value,
        Tile.TREASURE.value,
        Tile.AMULET.value,
        Tile.MONSTER.value,
        Tile.PILLAR.value,
        Tile.DOOR.value,
        Tile.EXIT.value,
    }
)


class _Reader:
    """Whitespace-skipping reader of integers and single characters."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def read_int(self, what: str) -> int:
        self._skip_space()
        start = self._pos
        if self._pos < len(self._text) and self._text[self._pos] in "+-":
            self._pos += 1
        digits_start = self._pos
        while self._pos < len(self._text) and self._text[self._pos].isdigit():
            self._pos += 1
        if self._pos == digits_start:
            raise LevelError(f"expected an integer for {what}")
        value = int(self._text[start:self._pos])
        if not INT32_MIN <= value <= INT32_MAX:
            raise LevelError(f"{what} does not fit in a 32-bit integer")
        return value

    def read_char(self) -> str | None:
        self._skip_space()
        if self._pos >= len(self._text):
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char


def load_level(file_name):
    """Load a level file and return ``(grid, player)``.

    The player's start tile is marked on the grid. The returned player
    carries no treasure. Raises LevelError for any invalid file.
    """
    try:
        text = Path(file_name).read_text()
    except OSError as exc:
        raise LevelError(f"cannot open level file {file_name!s}") from exc

    reader = _Reader(text)
    rows = reader.read_int("row count")
    cols = reader.read_int("column count")
    if not 0 < rows <= MAX_DIMENSION:
        raise LevelError("row count out of range")
    if not 0 < cols <= MAX_DIMENSION:
        raise LevelError("column count out of range")
    if cols > INT32_MAX // rows or rows > INT32_MAX // cols:
        raise LevelError("level has too many tiles")

    player_row = reader.read_int("player row")
    player_col = reader.read_int("player column")
    if not 0 <= player_row < rows:
        raise LevelError("player row outside the level")
    if not 0 <= player_col < cols:
        raise LevelError("player column outside the level")

    grid = []
    for _ in range(rows):
        row = []
        for _ in range(cols):
            char = reader.read_char()
            if char is None:
                raise LevelError("not enough tiles in level")
            if char not in _FILE_TILES:
                raise LevelError(f"invalid tile {char!r}")
            row.append(Tile(char))
        grid.append(row)

    if not any(tile in (Tile.DOOR, Tile.EXIT) for row in grid for tile in row):
        raise LevelError("level has no door or exit")
    if reader.read_char() is not None:
        raise LevelError("extra characters after level map")
    if grid[player_row][player_col] != Tile.OPEN:
        raise LevelError("player does not start on an open tile")

    grid[player_row][player_col] = Tile.PLAYER
    return grid, Player(player_row, player_col)


def get_direction(key, row, col):
    """Return the position one step from ``(row, col)`` in the key's direction.

    Steps up or left are ignored at row or column 0; unknown keys leave
    the position unchanged.
    """
    if key == MOVE_UP and row != 0:
        return row - 1, col
    if key == MOVE_DOWN:
        return row + 1, col
    if key == MOVE_LEFT and col != 0:
        return row, col - 1
    if key == MOVE_RIGHT:
        return row, col + 1
    return row, col


def create_map(rows, cols):
    """Return a ``rows`` by ``cols`` grid of open tiles."""
    return [[Tile.OPEN] * cols for _ in range(rows)]


def resize_map(grid):
    """Return a grid twice as tall and wide holding four copies of ``grid``.

    The top-left copy keeps the player; the other three have the
    player's tile left open.
    """
    if not grid or not grid[0]:
        raise ValueError("cannot resize an empty map")
    rows, cols = len(grid), len(grid[0])
    if rows > INT32_MAX // 2 or cols > INT32_MAX // 2:
        raise OverflowError("resized map would be too large")

    without_player = [
        [Tile.OPEN if tile == Tile.PLAYER else tile for tile in row] for row in grid
    ]
    top = [list(orig) + list(copy) for orig, copy in zip(grid, without_player)]
    bottom = [list(row) + list(row) for row in without_player]
    return top + bottom


def _size(grid):
    if not grid:
        return 0, 0
    return len(grid), len(grid[0])


def do_player_move(grid, player, next_row, next_col):
    """Move the player to ``(next_row, next_col)`` if allowed and return the status."""
    rows, cols = _size(grid)
    if not (0 <= next_row < rows and 0 <= next_col < cols):
        return Status.STAY

    target = grid[next_row][next_col]
    if target in (Tile.PILLAR, Tile.MONSTER):
        status = Status.STAY
        next_row, next_col = player.row, player.col
    elif target == Tile.TREASURE:
        status = Status.TREASURE
        player.treasure += 1
    elif target == Tile.AMULET:
        status = Status.AMULET
    elif target == Tile.DOOR:
        status = Status.LEAVE
    elif target == Tile.EXIT:
        if player.treasure >= 1:
            status = Status.ESCAPE
        else:
            status = Status.STAY
            next_row, next_col = player.row, player.col
    else:
        status = Status.MOVE

    grid[player.row][player.col] = Tile.OPEN
    grid[next_row][next_col] = Tile.PLAYER
    player.row, player.col = next_row, next_col
    return status


def _advance(grid, cells, toward):
    """Move monsters along ``cells`` one step toward the player until a pillar."""
    for (r, c), (tr, tc) in zip(cells, toward):
        if grid[r][c] == Tile.PILLAR:
            break
        if grid[r][c] == Tile.MONSTER:
            grid[tr][tc] = Tile.MONSTER
            grid[r][c] = Tile.OPEN


def do_monster_attack(grid, player):
    """Move monsters in line of sight one step toward the player.

    Returns True if a monster ends on the player's tile.
    """
    rows, cols = _size(grid)
    if rows == 0:
        return False
    row, col = player.row, player.col

    if 0 < row <= rows - 1:
        cells = [(i, col) for i in range(row - 1, -1, -1)]
        _advance(grid, cells, [(i + 1, col) for i, _ in cells])
    if 0 <= row < rows - 1:
        cells = [(i, col) for i in range(row + 1, rows)]
        _advance(grid, cells, [(i - 1, col) for i, _ in cells])
    if 0 < col <= cols - 1:
        cells = [(row, j) for j in range(col - 1, -1, -1)]
        _advance(grid, cells, [(row, j + 1) for _, j in cells])
    if 0 <= col < cols - 1:
        cells = [(row, j) for j in range(col + 1, cols)]
        _advance(grid, cells, [(row, j - 1) for _, j in cells])

    return grid[row][col] == Tile.MONSTER