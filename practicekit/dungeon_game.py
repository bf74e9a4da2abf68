"""Interactive driver for the dungeon crawler."""

from __future__ import annotations

import sys

from .dungeon_display import format_map, format_status, instructions_text
from .dungeon_logic import (
    INPUT_QUIT,
    INPUT_STAY,
    MOVE_DOWN,
    MOVE_LEFT,
    MOVE_RIGHT,
    MOVE_UP,
    LevelError,
    Player,
    Status,
    do_monster_attack,
    do_player_move,
    get_direction,
    load_level,
    resize_map,
)

_VALID_KEYS = frozenset({MOVE_UP, MOVE_LEFT, MOVE_DOWN, MOVE_RIGHT, INPUT_STAY})
_PROMPT = "Enter command (w,a,s,d: move, e: stay still, q: quit): "


def run_game(dungeon, total_rooms, commands, out):
    """Play the levels ``<dungeon>1.txt`` .. ``<dungeon>N.txt``.

    ``commands`` is an iterable of strings whose non-space characters are
    the player's keys. Returns the exit code: 1 if a level cannot be
    loaded, otherwise 0.
    """
    keys = (ch for chunk in commands for ch in chunk if not ch.isspace())
    player = Player()
    total_moves = 0

    for room in range(1, total_rooms + 1):
        out.write(f"Level {room}\n")
        try:
            grid, start = load_level(f"{dungeon}{room}.txt")
        except LevelError:
            out.write("Returning you back to the real word, adventurer!\n")
            return 1
        player.row, player.col = start.row, start.col
        out.write(format_map(grid))

        while True:
            out.write(_PROMPT)
            key = next(keys, None)
            if key is None:
                return 0
            if key == INPUT_QUIT:
                out.write("Thank you for playing!\n")
                return 0
            if key not in _VALID_KEYS:
                out.write("I did not understand your command, adventurer!\n")
                continue

            total_moves += 1
            if key == INPUT_STAY:
                status = Status.STAY
            else:
                next_row, next_col = get_direction(key, player.row, player.col)
                status = do_player_move(grid, player, next_row, next_col)

            if status == Status.ESCAPE:
                out.write(format_map(grid))
                out.write(format_status(status, player, total_moves))
                return 0
            if status == Status.LEAVE:
                out.write(format_map(grid))
                out.write(format_status(status, player, total_moves))
                break
            if do_monster_attack(grid, player):
                out.write(format_map(grid))
                out.write("You died, adventurer! Better luck next time!\n")
                return 0
            if status == Status.AMULET:
                grid = resize_map(grid)

            out.write(format_map(grid))
            out.write(format_status(status, player, total_moves))
    return 0


def main(argv=None):
    """Run the game; the dungeon name and level count come from argv or stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    out.write(instructions_text())
    out.write("Please enter the dungeon name and number of levels: ")
    words = args[:2] if len(args) >= 2 else sys.stdin.readline().split()[:2]
    if len(words) < 2:
        return 0
    dungeon, rooms_text = words
    try:
        total_rooms = int(rooms_text)
    except ValueError:
        total_rooms = 0
    return run_game(dungeon, total_rooms, sys.stdin, out)


if __name__ == "__main__":
    sys.exit(main())