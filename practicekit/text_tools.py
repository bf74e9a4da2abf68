"""String exercises: password conversion, trimming and word filtering."""

from __future__ import annotations

import string
import sys

_C_SPACE = " \t\n\v\f\r"
_EDGE_SPACE = " \n\t"
_MASK = "#"

_VOWEL_SWAPS = str.maketrans(
    {"a": "@", "e": "3", "i": "!", "o": "0", "u": "^"}
)

MENU = (
    "(1) Deobfuscate\n"
    "(2) Word Filter\n"
    "(3) Password Converter\n"
    "(4) Word Calculator\n"
    "(5) Palindrome Counter\n"
    "(q) Quit Program\n"
    "Select a function to run: "
)


def convert_password(text):
    """Swap common vowels for symbols and append the result reversed."""
    converted = text.translate(_VOWEL_SWAPS)
    return converted + converted[::-1]


def trim(text):
    """Remove leading whitespace and trailing characters after the last letter.

    Only strings that start or end with a space, tab or newline are changed.
    An all-whitespace string becomes empty. When no letter follows the first
    character, only the first character is kept before leading whitespace
    is stripped.
    """
    if all(char in _C_SPACE for char in text):
        return ""
    if text[0] not in _EDGE_SPACE and text[-1] not in _EDGE_SPACE:
        return text
    last = next(
        (i for i in range(len(text) - 1, 0, -1) if text[i] in string.ascii_letters),
        0,
    )
    return text[: last + 1].lstrip(_C_SPACE)


def filter_word(sentence, word):
    """Replace each occurrence of ``word`` in ``sentence`` with ``#`` marks.

    Occurrences are replaced one at a time from the left, so a mask can
    complete a new occurrence. Raises ValueError for an empty word or one
    made only of ``#``, which could never be filtered away.
    """
    if not word or set(word) == {_MASK}:
        raise ValueError("filter word must contain a character other than '#'")
    mask = _MASK * len(word)
    while (index := sentence.find(word)) != -1:
        sentence = sentence[:index] + mask + sentence[index + len(word):]
    return sentence


class _CharStream:
    """Reads characters, words and lines from buffered console input."""

    def __init__(self, text):
        self._text = text
        self._pos = 0

    def _skip_space(self):
        while self._pos < len(self._text) and self._text[self._pos] in _C_SPACE:
            self._pos += 1

    def read_char(self):
        self._skip_space()
        if self._pos >= len(self._text):
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char

    def ignore(self):
        if self._pos < len(self._text):
            self._pos += 1

    def read_word(self):
        self._skip_space()
        start = self._pos
        while self._pos < len(self._text) and self._text[self._pos] not in _C_SPACE:
            self._pos += 1
        return self._text[start:self._pos] or None

    def getline(self):
        if self._pos >= len(self._text):
            return None
        end = self._text.find("\n", self._pos)
        if end == -1:
            line, self._pos = self._text[self._pos:], len(self._text)
        else:
            line, self._pos = self._text[self._pos:end], end + 1
        return line


def _word_filter(stream, out):
    out.write("Please enter the sentence: ")
    sentence = stream.getline() or ""
    out.write("Please enter the filter word: ")
    word = stream.read_word()
    if word is None:
        return False
    out.write(f"Filtered sentence: {filter_word(sentence, word)}\n")
    return True


def _password_converter(stream, out):
    out.write("Please enter your text input: ")
    text = stream.getline() or ""
    out.write(f"input: {text}\n")
    out.write(f"output: {convert_password(text)}\n")


def run_menu(lines, out):
    """Run the exercise menu on the input ``lines`` until ``q`` or end of input."""
    stream = _CharStream("".join(lines))
    while True:
        out.write(MENU)
        selection = stream.read_char()
        if selection is None:
            return 0
        stream.ignore()
        out.write("\n")
        if selection == "2":
            if not _word_filter(stream, out):
                return 0
        elif selection == "3":
            _password_converter(stream, out)
        elif selection in ("1", "4", "5"):
            pass
        elif selection == "q":
            out.write("Quitting\n")
        else:
            out.write("Invaid input\n")
        out.write("\n")
        if selection == "q":
            return 0


def main(argv=None):
    """Run the exercise menu on standard input."""
    return run_menu(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())