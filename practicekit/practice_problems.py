"""Assorted integer and list practice problems."""

from __future__ import annotations

MAX_VALUES = 5000


def is_tri_product(n):
    """Return True if ``n`` is a product of three consecutive positive integers."""
    for i in range(1, n // 2 + 1):
        value = i * (i + 1) * (i + 2)
        if value == n:
            return True
        if value > n:
            break
    return False


def find_sum(values, target):
    """Return every pair ``(values[i], values[j])``, ``i < j``, summing to ``target``.

    Raises ValueError unless there are between 1 and 4999 values.
    """
    values = list(values)
    if not 0 < len(values) < MAX_VALUES:
        raise ValueError("Array size must be between 1 - 4999")
    return [
        (first, second)
        for i, first in enumerate(values)
        for second in values[i + 1:]
        if first + second == target
    ]


def is_palindrome(n):
    """Return True if the digits of ``n`` read the same in both directions."""
    digits = str(abs(n))
    return digits == digits[::-1]


def _digits_from_right(n):
    n = abs(n)
    while n:
        n, digit = divmod(n, 10)
        yield digit


def is_happy_number(n):
    """Return True if summing squared digits reaches 1 before 4.

    The running sum is checked after every digit. Raises ValueError for 0,
    which never reaches either value.
    """
    if n == 0:
        raise ValueError("0 is neither happy nor unhappy")
    while True:
        total = 0
        for digit in _digits_from_right(n):
            total += digit * digit
            if total == 1:
                return True
            if total == 4:
                return False
        if total == 0:
            raise ValueError("sequence reached 0")
        n = total


def has_failing_grade(grades):
    """Return True if any grade is below 60; raises ValueError for no grades."""
    grades = list(grades)
    if not grades:
        raise ValueError("There are no grades.")
    return any(grade < 60 for grade in grades)