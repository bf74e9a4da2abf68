"""An integer stack whose reserved capacity doubles as it fills."""

from __future__ import annotations

import sys


class IntStack:
    """Last-in, first-out stack of integers starting with a capacity of one."""

    def __init__(self):
        self._items = []
        self._capacity = 1

    @property
    def capacity(self):
        """Number of slots reserved; doubles whenever a push finds it full."""
        return self._capacity

    def push(self, number):
        """Push ``number`` onto the stack."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(number)

    def pop(self):
        """Remove and return the top number; raises IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self):
        """Return the top number without removing it; raises IndexError if empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self):
        return len(self._items)


def main(argv=None):
    """Show the calculator prompt."""
    print("Type RPN expression (end with '=').")
    sys.stdout.write("> ")
    return 0


if __name__ == "__main__":
    sys.exit(main())