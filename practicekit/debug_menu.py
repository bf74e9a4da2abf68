"""Menu that runs the overflow-protected problem functions on typed input."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable

from .overflow_problems import (
    boxes_needed,
    good_dinner,
    largest,
    product,
    smarter_section,
    sum_between,
    sum_is_even,
)


@dataclass(frozen=True)
class _Entry:
    name: str
    argc: int
    call: Callable


_FUNCTIONS = {
    1: _Entry("Largest", 3, largest),
    2: _Entry("SumIsEven", 2, sum_is_even),
    3: _Entry("BoxesNeeded", 1, boxes_needed),
    4: _Entry("SmarterSection", 4, smarter_section),
    5: _Entry("GoodDinner", 2, lambda pizzas, weekend: good_dinner(pizzas, bool(weekend))),
    6: _Entry("SumBetween", 2, sum_between),
    7: _Entry("Product", 2, product),
}
_EXIT_ID = 8
_EXIT_NAME = "Exit the program"


def _show(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def describe_call(function_id, args):
    """Call the numbered function with ``args`` and describe the outcome."""
    try:
        entry = _FUNCTIONS[function_id]
    except KeyError:
        raise ValueError(f"no function with id {function_id}") from None
    used = list(args)[: entry.argc]
    head = f"{entry.name}({', '.join(str(a) for a in used)})"
    try:
        result = entry.call(*used)
    except ValueError:
        return f"{head} threw an invalid_argument exception"
    except OverflowError:
        return f"{head} threw an overflow_error exception"
    except Exception:
        return f"{head} threw an unknown thing"
    return f"{head} returned {_show(result)}"


def _menu_text():
    lines = ["", "=== Menu ==="]
    lines += [f"{fid}) {entry.name}" for fid, entry in _FUNCTIONS.items()]
    lines.append(f"{_EXIT_ID}) {_EXIT_NAME}")
    return "\n".join(lines) + "\n>> "


def _read_int(tokens):
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def run_menu(tokens, out):
    """Run the menu loop on whitespace-separated input ``tokens``."""
    tokens = iter(tokens)
    out.write("Welcome to the Debugging Homework for CS 12x!\n")
    out.write(
        "Please enter a number to run the function with the corresponding number: \n"
    )
    while True:
        out.write(_menu_text())
        choice = _read_int(tokens)
        if choice is None:
            print("Input failed", file=sys.stderr)
            break
        if choice not in _FUNCTIONS:
            break

        args = []
        for _ in range(_FUNCTIONS[choice].argc):
            out.write("Please enter an integer: ")
            value = _read_int(tokens)
            if value is None:
                break
            args.append(value)
        else:
            out.write(describe_call(choice, args) + "\n")
            continue
        out.write("Invalid input detected\n")
        break

    out.write("Exiting program.\n")
    return 0


def main(argv=None):
    """Run the menu on standard input."""
    tokens = (token for line in sys.stdin for token in line.split())
    return run_menu(tokens, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())