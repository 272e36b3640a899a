"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

DEFAULT_CAPACITY = 101


class StackError(Exception):
    """Base class for stack errors."""


class StackOverflowError(StackError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(StackError):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """A stack with a fixed maximum number of items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        if len(self._items) >= self.capacity:
            raise StackOverflowError("Stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise StackUnderflowError("No element to pop")
        return self._items.pop()

    def top(self) -> Any:
        if not self._items:
            raise StackUnderflowError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"]


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, item: Any) -> None:
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackUnderflowError("No element to pop")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        if self._top is None:
            raise StackUnderflowError("Stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Yield items from the top down."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)