"""Number guessing by repeated halving of the range."""

from __future__ import annotations

import sys

INTRO = (
    "Choose a number from 0 to 100.\n"
    "Answer with:\n"
    "   l (your num is lower)\n"
    "   h (your num is higher)\n"
    "   any other key (guess is right).\n"
)


def _midpoint(low, high):
    total = low + high
    half = abs(total) // 2
    return half if total >= 0 else -half


def guess_number(low, high, answers, out):
    """Guess the number between ``low`` and ``high`` from the player's answers.

    ``answers`` is an iterable of strings whose non-space characters are the
    replies: ``l`` for lower, ``h`` for higher, anything else for correct.
    Returns the confirmed guess, or None if the answers run out.
    """
    keys = (char for chunk in answers for char in chunk if not char.isspace())
    while True:
        mid = _midpoint(low, high)
        out.write(f"Is it {mid}? (l/h/y): ")
        answer = next(keys, None)
        if answer is None:
            return None
        if answer == "l":
            high = mid
        elif answer == "h":
            low = mid + 1
        else:
            out.write("Thank you!\n")
            return mid


def main(argv=None):
    """Play the guessing game on standard input."""
    sys.stdout.write(INTRO)
    guess_number(0, 100, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())