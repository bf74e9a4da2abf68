"""Small exercises: swapping without a temporary, addition checks and file input."""

from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_NUMBER_FILE = "numFile.txt"


def swap_without_temp(a, b):
    """Return ``(b, a)`` computed with sums and differences only."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def add(a, b):
    """Return ``a + b``."""
    return a + b


def read_two_numbers(path):
    """Return the first two integers on the first line of the file at ``path``.

    Raises OSError if the file cannot be read and ValueError if the line does
    not start with two integers.
    """
    with open(path) as handle:
        first_line = handle.readline()
    words = first_line.split()
    if len(words) < 2:
        raise ValueError("expected two integers on the first line")
    return int(words[0]), int(words[1])


def _check_add(out):
    passed = True
    for i in range(5):
        for j in range(3):
            actual = i + j
            expected = add(i, j)
            out.write(f"Expected: {expected} Actual: {actual}\n")
            if actual != expected:
                out.write(f"Error at (a,b) = ({i},{j})\n")
                passed = False
    return passed and add(0, 0) == 0 and add(10, 0) == 10 and add(0, 8) == 8


def main(argv=None):
    """Show the swap, check addition and sum two numbers from a file."""
    args = sys.argv[1:] if argv is None else list(argv)
    name = args[0] if args else DEFAULT_NUMBER_FILE
    out = sys.stdout

    a, b = swap_without_temp(3, 5)
    out.write(f"{a} {b}\n")
    if not _check_add(out):
        return 1

    out.write(f"Opening file {name}.\n")
    try:
        first, second = read_two_numbers(Path(name))
    except OSError:
        out.write(f"Could not open file {name}.\n")
        return 1
    except ValueError:
        out.write(f"Could not read two numbers from {name}.\n")
        return 1
    out.write(f"Closing file {name}.\n")
    out.write(f"num1: {first}\n")
    out.write(f"num2: {second}\n")
    out.write(f"num1 + num2: {first + second}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())