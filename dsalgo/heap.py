"""Bounded binary min-heap and heap sort."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterable, Iterator, Optional

DEFAULT_CAPACITY = 15


class HeapFullError(Exception):
    """Raised when inserting into a heap at capacity."""


def _sift_down(data: list, index: int, size: int) -> None:
    while True:
        left = 2 * index + 1
        right = left + 1
        smallest = index
        if left < size and data[left] < data[smallest]:
            smallest = left
        if right < size and data[right] < data[smallest]:
            smallest = right
        if smallest == index:
            return
        data[index], data[smallest] = data[smallest], data[index]
        index = smallest


def _sift_up(data: list, index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not data[index] < data[parent]:
            return
        data[index], data[parent] = data[parent], data[index]
        index = parent


def _heapify(data: list) -> None:
    for index in reversed(range(len(data) // 2)):
        _sift_down(data, index, len(data))


class MinHeap:
    """A min-heap holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: list[Any] = []

    @classmethod
    def from_iterable(
        cls, items: Iterable[Any], capacity: Optional[int] = None
    ) -> "MinHeap":
        """Build a heap from ``items`` in linear time."""
        data = list(items)
        if capacity is None:
            capacity = max(DEFAULT_CAPACITY, len(data))
        if len(data) > capacity:
            raise HeapFullError("The heap is full. Cannot insert")
        heap = cls(capacity)
        _heapify(data)
        heap._data = data
        return heap

    def insert(self, item: Any) -> None:
        if len(self._data) >= self.capacity:
            raise HeapFullError("The heap is full. Cannot insert")
        self._data.append(item)
        _sift_up(self._data, len(self._data) - 1)

    def peek(self) -> Any:
        if not self._data:
            raise IndexError("peek from an empty heap")
        return self._data[0]

    def extract_min(self) -> Any:
        if not self._data:
            raise IndexError("extract from an empty heap")
        last = self._data.pop()
        if not self._data:
            return last
        smallest = self._data[0]
        self._data[0] = last
        _sift_down(self._data, 0, len(self._data))
        return smallest

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        """Yield items in storage (heap) order."""
        return iter(list(self._data))


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with a min-heap, leaving the values in descending order."""
    data = list(values)
    _heapify(data)
    for end in range(len(data) - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, 0, end)
    return data


def count_unmoved(values: Iterable[Any]) -> int:
    """Count positions whose value is unchanged by ``heap_sort``."""
    original = list(values)
    return sum(a == b for a, b in zip(original, heap_sort(original)))


def main(argv: Optional[list[str]] = None) -> int:
    """Read test cases from stdin and print the unmoved count for each."""
    parser = argparse.ArgumentParser(
        description="Count values left in place by a heap sort."
    )
    parser.parse_args(argv)
    numbers = iter(int(token) for token in sys.stdin.read().split())
    cases = next(numbers, 0)
    for _ in range(cases):
        count = next(numbers)
        values = [next(numbers) for _ in range(count)]
        print(count_unmoved(values))
    return 0