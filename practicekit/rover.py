"""A rover that stores and analyses a chemical SMILE string."""

from __future__ import annotations

import re
import sys
from collections import deque
from pathlib import Path

from .mystring import MyString

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]")


class Rover:
    """Holds one SMILE string and answers queries about it."""

    def __init__(self, smile=None):
        self._smile = MyString(smile if smile is not None else "")

    @property
    def smile(self):
        """A copy of the stored SMILE string."""
        return MyString(self._smile)

    @smile.setter
    def smile(self, value):
        self._smile.assign(MyString(value))

    def print(self, out=None):
        """Write the stored string followed by a newline."""
        out = sys.stdout if out is None else out
        out.write(f"{self._smile}\n")

    def read(self, n):
        """Return the character at ``n``; raises IndexError when out of range."""
        return self._smile.at(n)

    def clear(self):
        """Empty the stored string."""
        if not self._smile.empty():
            self._smile.clear()

    def join(self, text):
        """Append ``text`` to the stored string."""
        self._smile += MyString(text)

    def test(self, text):
        """Return the stored string with ``text`` appended, leaving it unchanged."""
        tester = MyString(self._smile)
        tester += MyString(text)
        return tester

    def find(self, text):
        """Return True if ``text`` occurs in the stored string."""
        return self._smile.find(MyString(text)) >= 0


def parse_digits(text):
    """Return the base-10 number formed by the digits in ``text``; others are skipped."""
    result = 0
    for char in str(text):
        if "0" <= char <= "9":
            result = result * 10 + (ord(char) - ord("0"))
    return result


def run_commands(text, out):
    """Run a rover command script and write its output to ``out``.

    Tokens are separated by single whitespace characters. Commands are
    chosen by their first character: P prints, C clears, and S, R, J, T, F
    take the following token as their argument. Any other command consumes
    the following token and does nothing.
    """
    tokens = deque(_WHITESPACE.split(text))
    rover = Rover()
    while tokens:
        command = MyString(tokens.popleft()).front()
        if command == "P":
            rover.print(out)
            continue
        if command == "C":
            rover.clear()
            continue
        data = tokens.popleft() if tokens else ""
        if command == "S":
            rover.smile = data
        elif command == "R":
            out.write(f"{rover.read(parse_digits(data))}\n")
        elif command == "J":
            rover.join(data)
        elif command == "T":
            out.write(f"{rover.test(data)}\n")
        elif command == "F":
            found = "was found" if rover.find(data) else "was not found"
            out.write(f"{data} {found}\n")


def main(argv=None):
    """Run the command file named in argv or on the first word of stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        filename = args[0]
    else:
        words = sys.stdin.readline().split()
        filename = words[0] if words else ""
    try:
        text = Path(filename).read_text() if filename else None
    except OSError:
        text = None
    if text is None:
        print("Unable to open file")
        return 1
    run_commands(text, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())