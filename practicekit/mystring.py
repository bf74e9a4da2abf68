"""A small growable string with explicit size and capacity bookkeeping."""

from __future__ import annotations

NOT_FOUND = -1


def _as_text(value):
    if isinstance(value, MyString):
        return value.data()
    if value is None:
        return ""
    return str(value)


class MyString:
    """A mutable string that tracks its size and the capacity it has reserved.

    A new string from text reserves one slot more than its length; an empty
    string reserves one slot. Copying a MyString copies its capacity too.
    """

    def __init__(self, text=None):
        if isinstance(text, MyString):
            self._text = text._text
            self._capacity = text._capacity
        elif text is None:
            self._text = ""
            self._capacity = 1
        else:
            self._text = str(text)
            self._capacity = len(self._text) + 1

    def resize(self, n):
        """Shrink the string to ``n`` characters.

        Requests of at least the capacity leave the string unchanged. Growing
        within the capacity pads with NUL characters.
        """
        if n < 0:
            raise ValueError("size must not be negative")
        if n >= self._capacity:
            return
        if n <= len(self._text):
            self._text = self._text[:n]
        else:
            self._text = self._text + "\0" * (n - len(self._text))

    def capacity(self):
        """Return the number of character slots reserved."""
        return self._capacity

    def size(self):
        """Return the number of characters held."""
        return len(self._text)

    def length(self):
        """Return the number of characters held."""
        return len(self._text)

    def data(self):
        """Return the characters as a plain string."""
        return self._text

    def empty(self):
        """Return True if the string holds no characters."""
        return not self._text

    def front(self):
        """Return the first character, or NUL for an empty string."""
        return self._text[0] if self._text else "\0"

    def at(self, pos):
        """Return the character at ``pos``; raises IndexError when out of range."""
        if pos < 0 or pos >= len(self._text):
            raise IndexError("position is out of range")
        return self._text[pos]

    def clear(self):
        """Remove every character, keeping the reserved capacity."""
        self._text = ""

    def assign(self, other):
        """Replace the contents with those of ``other``; returns self."""
        if other is self:
            return self
        text = _as_text(other)
        if len(text) > self._capacity:
            self._capacity = len(text) + 1
        self._text = text
        return self

    def find(self, other, pos=0):
        """Return the index of ``other`` at or after ``pos``, or -1.

        An empty search string is never found.
        """
        needle = _as_text(other)
        if not needle or pos < 0:
            return NOT_FOUND
        if len(needle) > len(self._text):
            return NOT_FOUND
        return self._text.find(needle, pos)

    def __iadd__(self, other):
        text = _as_text(other)
        if len(self._text) + len(text) > self._capacity:
            self._capacity = len(self._text) + len(text) + 1
        self._text += text
        return self

    def __eq__(self, other):
        if not isinstance(other, MyString):
            return NotImplemented
        return self._text == other._text

    def __len__(self):
        return len(self._text)

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"MyString({self._text!r})"