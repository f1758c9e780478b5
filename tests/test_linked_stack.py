import pytest

from dsalgo.linked_stack import LinkedStack


def test_new_stack_is_empty():
    stack = LinkedStack()
    assert stack.is_empty()
    assert len(stack) == 0
    assert list(stack) == []


def test_iteration_runs_from_top_down():
    stack = LinkedStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3
    assert not stack.is_empty()


def test_pop_returns_values_in_reverse_order():
    stack = LinkedStack()
    values = [10, 20, 30, 40]
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert stack.is_empty()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedStack().pop()


def test_pop_after_drain_raises():
    stack = LinkedStack()
    stack.push(5)
    assert stack.pop() == 5
    with pytest.raises(IndexError):
        stack.pop()


def test_push_after_pop_keeps_links_consistent():
    stack = LinkedStack()
    stack.push(1)
    stack.push(2)
    stack.pop()
    stack.push(3)
    assert list(stack) == [3, 1]
    assert len(stack) == 2