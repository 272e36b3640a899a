import pytest

from dsalgo.stack import (
    ArrayStack,
    LinkedStack,
    StackError,
    StackOverflowError,
    StackUnderflowError,
)


def test_array_stack_is_lifo():
    stack = ArrayStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.top() == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_array_stack_overflow():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_array_stack_default_capacity():
    stack = ArrayStack()
    for value in range(101):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(101)


def test_array_stack_underflow():
    stack = ArrayStack()
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.top()


def test_array_stack_negative_capacity():
    with pytest.raises(ValueError):
        ArrayStack(-1)


def test_errors_share_base():
    stack = LinkedStack()
    with pytest.raises(StackError):
        stack.pop()


def test_linked_stack_push_pop_peek():
    stack = LinkedStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.pop() == 30
    assert stack.peek() == 20
    assert list(stack) == [20, 10]
    assert len(stack) == 2


def test_linked_stack_str():
    stack = LinkedStack()
    for value in (10, 20):
        stack.push(value)
    assert str(stack) == "20 10"


def test_linked_stack_underflow():
    stack = LinkedStack()
    assert stack.is_empty()
    with pytest.raises(StackUnderflowError):
        stack.peek()
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_linked_stack_drains_in_reverse():
    values = list(range(50))
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    drained = [stack.pop() for _ in values]
    assert drained == values[::-1]
    assert stack.is_empty()