import copy

import pytest

from dsakit.stack import (
    AbstractStack,
    EmptyStackError,
    LinkedStack,
    ResizableStack,
    main,
)


def test_abstract_stack_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractStack()


@pytest.mark.parametrize("stack_type", [LinkedStack, ResizableStack])
def test_new_stack_is_empty(stack_type):
    stack = stack_type()
    assert stack.is_empty() is True
    assert len(stack) == 0


@pytest.mark.parametrize("stack_type", [LinkedStack, ResizableStack])
@pytest.mark.parametrize("operation", ["pop", "peek"])
def test_empty_stack_read_raises(stack_type, operation):
    stack = stack_type()
    read = getattr(stack, operation)
    with pytest.raises(EmptyStackError) as excinfo:
        read()
    assert "Stack is empty" in str(excinfo.value)
    assert stack.is_empty() is True
    assert len(stack) == 0


def test_empty_stack_error_is_index_error():
    with pytest.raises(IndexError):
        LinkedStack().pop()


@pytest.mark.parametrize("stack_type", [LinkedStack, ResizableStack])
def test_push_peek_pop_lifo(stack_type):
    stack = stack_type()
    for value in range(5):
        stack.push(value)
    assert stack.peek() == 4
    assert [stack.pop() for _ in range(5)] == [4, 3, 2, 1, 0]
    assert stack.is_empty()


@pytest.mark.parametrize("stack_type", [LinkedStack, ResizableStack])
def test_peek_does_not_remove(stack_type):
    stack = stack_type()
    stack.push("x")
    assert [stack.peek(), stack.peek()] == ["x", "x"]
    assert len(stack) == 1


@pytest.mark.parametrize("stack_type", [LinkedStack, ResizableStack])
def test_copy_is_independent(stack_type):
    stack = stack_type()
    for value in [1, 2, 3]:
        stack.push(value)
    clone = copy.copy(stack)
    clone.push(4)
    assert stack.pop() == 3
    assert [clone.pop(), clone.pop()] == [4, 3]
    assert len(stack) == 2


def test_linked_stack_iteration_and_copy_order():
    stack = LinkedStack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert list(copy.copy(stack)) == [3, 2, 1]


def test_resizable_stack_default_capacity():
    assert ResizableStack().capacity == 16


def test_resizable_stack_doubles_when_full():
    stack = ResizableStack(2)
    stack.push(1)
    stack.push(2)
    assert stack.capacity == 2
    stack.push(3)
    assert stack.capacity == 4
    assert stack.pop() == 3


def test_resizable_stack_capacity_never_below_size():
    stack = ResizableStack(1)
    for value in range(50):
        stack.push(value)
        assert stack.capacity >= len(stack)
    assert stack.peek() == 49


def test_resizable_stack_zero_capacity_grows():
    stack = ResizableStack(0)
    stack.push("a")
    assert stack.peek() == "a"
    assert stack.capacity >= 1


def test_resizable_stack_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ResizableStack(-1)


def test_resizable_stack_copy_keeps_capacity():
    stack = ResizableStack(3)
    stack.push(1)
    assert copy.copy(stack).capacity == stack.capacity


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.split() == ["1", "0", "10", "1", "99"]