import pytest

from practicekit.int_stack import IntStack, main


def test_push_pop_is_last_in_first_out():
    stack = IntStack()
    values = [4, -2, 9, 0, 7]
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == list(reversed(values))
    assert len(stack) == 0


def test_peek_does_not_remove():
    stack = IntStack()
    stack.push(5)
    stack.push(8)
    assert stack.peek() == 8
    assert len(stack) == 2
    assert stack.pop() == 8
    assert stack.peek() == 5


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        IntStack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        IntStack().peek()


def test_initial_capacity_is_one():
    assert IntStack().capacity == 1


def test_capacity_doubles_to_fit():
    stack = IntStack()
    for n in range(1, 40):
        stack.push(n)
        capacity = stack.capacity
        assert capacity & (capacity - 1) == 0
        assert len(stack) <= capacity < 2 * len(stack)


def test_capacity_kept_after_pop():
    stack = IntStack()
    for n in range(5):
        stack.push(n)
    capacity = stack.capacity
    stack.pop()
    stack.pop()
    assert stack.capacity == capacity


def test_main_prints_prompt(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Type RPN expression (end with '=').\n> "