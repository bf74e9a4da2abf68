import pytest

from practicekit.practice_problems import (
    find_sum,
    has_failing_grade,
    is_happy_number,
    is_palindrome,
    is_tri_product,
)


def test_palindromes_from_source():
    assert is_palindrome(121) is True
    assert is_palindrome(-121) is True
    assert is_palindrome(1921923) is False


def test_palindrome_trailing_zero():
    assert is_palindrome(10) is False
    assert is_palindrome(0) is True


def test_happy_numbers_from_source():
    assert is_happy_number(28) is True
    assert is_happy_number(102) is False


def test_one_is_happy():
    assert is_happy_number(1) is True


def test_happy_rejects_zero():
    with pytest.raises(ValueError):
        is_happy_number(0)


def test_tri_product_from_source():
    assert is_tri_product(120) is True


@pytest.mark.parametrize("n", [6, 24, 60, 120, 210])
def test_tri_products_of_consecutive(n):
    assert is_tri_product(n) is True


@pytest.mark.parametrize("n", [0, 1, 7, 121, -6])
def test_not_tri_products(n):
    assert is_tri_product(n) is False


def test_find_sum_from_source():
    assert find_sum([5, 3, 2, 4, 9], 6) == [(2, 4)]


def test_find_sum_pairs_all_hit_target():
    values = [1, 2, 3, 4, 5, 6]
    pairs = find_sum(values, 7)
    assert pairs
    assert all(a + b == 7 for a, b in pairs)


def test_find_sum_no_pairs():
    assert find_sum([1, 2], 100) == []


def test_find_sum_rejects_empty():
    with pytest.raises(ValueError, match="between 1 - 4999"):
        find_sum([], 6)


def test_find_sum_rejects_too_many():
    with pytest.raises(ValueError):
        find_sum([0] * 5000, 0)


def test_failing_grade_found_before_passing():
    assert has_failing_grade([70, 50, 80]) is True


def test_no_failing_grade():
    assert has_failing_grade([60, 100]) is False


def test_failing_grade_rejects_empty():
    with pytest.raises(ValueError, match="no grades"):
        has_failing_grade([])