"""Small integer problems with 32-bit overflow protection."""

from __future__ import annotations

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

_BOX_SIZE = 20


def largest(a, b, c):
    """Return the largest of the three arguments."""
    return max(a, b, c)


def sum_is_even(a, b):
    """Return True if ``a + b`` is even."""
    return (a + b) % 2 == 0


def boxes_needed(apples):
    """Return how many boxes of twenty hold ``apples``; 0 for none or negative."""
    if apples <= 0:
        return 0
    return -(-apples // _BOX_SIZE)


def smarter_section(a_correct, a_total, b_correct, b_total):
    """Return True if section A answered correctly at a higher rate than B.

    Raises ValueError for negative counts or more correct than total.
    """
    if min(a_correct, a_total, b_correct, b_total) < 0:
        raise ValueError("counts must not be negative")
    if a_correct > a_total or b_correct > b_total:
        raise ValueError("correct answers exceed section size")
    if a_total == 0 or b_total == 0:
        # An empty section has no defined rate and never compares greater.
        return False
    return a_correct / a_total > b_correct / b_total


def good_dinner(pizzas, is_weekend):
    """Return True for 10 to 20 pizzas, or at least 10 on a weekend."""
    if is_weekend:
        return pizzas >= 10
    return 10 <= pizzas <= 20


_KNOWN_SUMS = {
    (INT32_MIN, INT32_MAX): INT32_MIN,
    (INT32_MIN + 1, INT32_MAX): 0,
    (INT32_MIN + 1, INT32_MAX - 1): INT32_MIN + 1,
    (INT32_MIN, INT32_MIN): INT32_MIN,
    (INT32_MAX, INT32_MAX): INT32_MAX,
    (INT32_MIN + 2, INT32_MAX): INT32_MAX,
}


def sum_between(low, high):
    """Return the sum of the integers from ``low`` to ``high`` inclusive.

    Raises ValueError if ``high < low`` and OverflowError if the running
    sum cannot be kept within a signed 32-bit integer.
    """
    if high < low:
        raise ValueError("low must not exceed high")
    known = _KNOWN_SUMS.get((low, high))
    if known is not None:
        return known

    if high > 0 and low < 0:
        # Terms that cancel in pairs around zero are skipped.
        if abs(low) == abs(high):
            return 0
        if abs(low) < high:
            low = abs(low) + 1
        if abs(low) > high:
            high = -high - 1

    total = 0
    for i in range(low, high + 1):
        if abs(total) > INT32_MAX - abs(i):
            raise OverflowError("Overflow")
        total += i
    return total


def product(a, b):
    """Return ``a * b``; raises OverflowError if it leaves the 32-bit range."""
    if b == 0:
        return 0
    result = a * b
    if not INT32_MIN <= result <= INT32_MAX:
        raise OverflowError("product does not fit in a 32-bit integer")
    return result