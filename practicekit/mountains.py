"""Classify numbers as mountain or valley ranges by their digit pattern."""

from __future__ import annotations

import itertools
import sys

_UINT32 = 2**32


def is_valid_range(a, b):
    """Return True if ``10 <= a <= b < 10000``."""
    return 10 <= a <= b < 10000


def _digit_count(number):
    temp = number + _UINT32 if number < 0 else number
    return len(str(temp)) if temp else 0


def _digits_from_right(number):
    """Digits from least significant, each carrying the sign of ``number``."""
    sign = -1 if number < 0 else 1
    remaining = abs(number)
    digits = []
    while remaining:
        remaining, digit = divmod(remaining, 10)
        digits.append(sign * digit)
    return digits


def classify(number):
    """Return 'M' for a mountain, 'V' for a valley, 'N' for neither.

    A mountain's digits first rise then alternate (``1 < 3 > 2``); a
    valley's first fall then alternate. Numbers with fewer than two digits
    count as mountains.
    """
    digits = _digits_from_right(number)
    even = _digit_count(number) % 2 == 0
    mountain = valley = True
    for step, (right, left) in enumerate(zip(digits, digits[1:]), start=1):
        rising = right > left
        falling = right < left
        if (step % 2 == 1) == even:
            mountain = mountain and rising
            valley = valley and falling
        else:
            mountain = mountain and falling
            valley = valley and rising
    if mountain:
        return "M"
    if valley:
        return "V"
    return "N"


def count_mountains_and_valleys(a, b):
    """Return ``(mountains, valleys)`` among the numbers ``a`` to ``b``."""
    kinds = [classify(n) for n in range(a, b + 1)]
    return kinds.count("M"), kinds.count("V")


def main(argv=None):
    """Prompt for a valid range on standard input and print the counts."""
    tokens = (token for line in sys.stdin for token in line.split())
    while True:
        sys.stdout.write("Enter numbers 10 <= a <= b < 10000: ")
        pair = list(itertools.islice(tokens, 2))
        if len(pair) < 2:
            return 1
        try:
            a, b = int(pair[0]), int(pair[1])
        except ValueError:
            a = b = 0
        if is_valid_range(a, b):
            break
        print("Invalid Input")
    mountains, valleys = count_mountains_and_valleys(a, b)
    print(
        f"There are {mountains} mountain ranges and {valleys} valley ranges "
        f"between {a} and {b}."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())