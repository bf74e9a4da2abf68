"""A singly linked list of integers."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list that appends at the tail or prepends at the head."""

    def __init__(self, values=()):
        self._head = None
        for value in values:
            self.insert(value)

    def insert(self, value):
        """Append ``value`` at the end of the list."""
        node = _Node(value)
        if self._head is None:
            self._head = node
            return
        current = self._head
        while current.next is not None:
            current = current.next
        current.next = node

    def insert_at_front(self, value):
        """Put ``value`` at the start of the list."""
        self._head = _Node(value, self._head)

    def __iter__(self):
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self):
        return sum(1 for _ in self)

    def average(self):
        """Return the mean of the values; raises ValueError for an empty list."""
        if self._head is None:
            raise ValueError("Empty list")
        values = list(self)
        return sum(values) / len(values)

    def display(self, out=None):
        """Write each value on its own line."""
        out = sys.stdout if out is None else out
        for value in self:
            out.write(f"{value}\n")


def main(argv=None):
    """Build a sample list, show it and print its average."""
    numbers = LinkedList()
    for value in (18, 7, 15):
        numbers.insert(value)
    numbers.insert_at_front(33)
    numbers.insert_at_front(12)
    numbers.display()
    print(f"{numbers.average():g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())