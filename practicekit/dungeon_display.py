"""Console rendering for the dungeon crawler."""

from __future__ import annotations

from .dungeon_logic import Status, Tile

DISPLAY_WIDTH = 3

_INSTRUCTIONS = (
    "",
    "---------------------------------------------------------",
    "Good day, adventurer!",
    "Your goal is to get the treasure and escape the dungeon!",
    " --- SYMBOLS ---",
    " o          : That is you, the adventurer!",
    " $          : These are treasures. Lots of money!",
    " @          : These magical amulets resize the level.",
    " M          : These are monsters; avoid them!",
    " +, -, |    : These are unpassable obstacles.",
    " ?          : A door to another level.",
    " !          : A door to escape the dungeon.",
    " --- CONTROLS ---",
    " w, a, s, d : Keys for moving up, left, down, and right.",
    " e          : Key for staying still for a turn.",
    " q          : Key for abandoning your quest.",
    "---------------------------------------------------------",
    "",
)


def instructions_text():
    """Return the greeting and legend shown at the start of a game."""
    return "".join(line + "\n" for line in _INSTRUCTIONS)


def _symbol(tile):
    if tile == Tile.OPEN:
        return " "
    return tile.value if isinstance(tile, Tile) else str(tile)


def format_map(grid):
    """Return the grid drawn inside a border, one tile per three columns."""
    cols = len(grid[0]) if grid else 0
    border = "+" + "-" * (cols * DISPLAY_WIDTH) + "+\n"
    body = "".join(
        "|" + "".join(f" {_symbol(tile)} " for tile in row) + "|\n" for row in grid
    )
    return border + body + border


def _treasure_word(count, trailing):
    return ("treasures" if count > 1 else "treasure") + trailing


def format_status(status, player, moves):
    """Return the message describing the outcome of a turn."""
    lines = []
    if status != Status.STAY:
        lines.append(f"You have moved to row {player.row} and column {player.col}")
    if status == Status.STAY:
        lines.append(f"You stayed at row {player.row} and column {player.col}")
        lines.append("You didn't move. Are you lost?")
    elif status == Status.TREASURE:
        lines.append("Well done, adventurer! You found some treasure.")
        lines.append(
            f"You now have {player.treasure} {_treasure_word(player.treasure, '.')}"
        )
    elif status == Status.AMULET:
        lines.append("The magic amulet sparkles and crumbles into dust.")
        lines.append("The ground begins to rumble. Are the walls moving?")
    elif status == Status.LEAVE:
        lines.append("You go through the doorway into the unknown beyond...")
    elif status == Status.ESCAPE:
        lines.append("Congratulations, adventurer! You have escaped the dungeon!")
        lines.append(
            f"You escaped with {player.treasure} "
            f"{_treasure_word(player.treasure, ' ')}and in {moves} total moves."
        )
    lines.append("")
    return "".join(line + "\n" for line in lines)