"""Adjacency-list graphs with traversal, and a degree-bounded edge store."""

from __future__ import annotations

from collections import deque
from typing import Any, Optional

DEFAULT_VERTICES = 5
DEFAULT_QUEUE_CAPACITY = 10


class QueueOverflowError(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueUnderflowError(Exception):
    """Raised when dequeueing from an empty queue."""


class BoundedQueue:
    """A FIFO queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        if len(self._items) >= self.capacity:
            raise QueueOverflowError("Queue overflow")
        self._items.append(item)

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueUnderflowError("Queue underflow")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class UndirectedGraph:
    """An undirected graph over vertices ``0 .. size - 1``.

    New edges are placed at the front of each adjacency list, so neighbours
    are listed most recent first.
    """

    def __init__(self, size: int = DEFAULT_VERTICES) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, first: int, second: int) -> None:
        self._check(first)
        self._check(second)
        self._adjacency[first].insert(0, second)
        self._adjacency[second].insert(0, first)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def bfs(self, source: int) -> list[int]:
        """Vertices other than ``source`` in breadth-first discovery order."""
        self._check(source)
        visited = {source}
        discovered: list[int] = []
        queue = BoundedQueue(max(len(self._adjacency), 1))
        queue.enqueue(source)
        while not queue.is_empty():
            current = queue.dequeue()
            for neighbour in self._adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    discovered.append(neighbour)
                    queue.enqueue(neighbour)
        return discovered

    def dfs(self, source: int) -> list[int]:
        """Vertices in depth-first visiting order, starting with ``source``."""
        self._check(source)
        visited = {source}
        order = [source]
        pending = [iter(self._adjacency[source])]
        while pending:
            for neighbour in pending[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    pending.append(iter(self._adjacency[neighbour]))
                    break
            else:
                pending.pop()
        return order

    def format(self) -> str:
        """One line per vertex: ``Vertice i: a -> b -> NULL``."""
        return "".join(
            f"Vertice {vertex}: "
            + "".join(f"{neighbour} -> " for neighbour in neighbours)
            + "NULL\n"
            for vertex, neighbours in enumerate(self._adjacency)
        )


class DegreeBoundedGraph:
    """A graph whose vertices each hold at most ``max_degree`` outgoing edges."""

    def __init__(
        self, vertex_count: int, max_degree: int, weighted: bool = False
    ) -> None:
        if vertex_count < 0 or max_degree < 0:
            raise ValueError("vertex_count and max_degree must not be negative")
        self.vertex_count = vertex_count
        self.max_degree = max_degree
        self.weighted = bool(weighted)
        self._edges: list[list[int]] = [[] for _ in range(vertex_count)]
        self._weights: list[list[float]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def insert_edge(
        self,
        origin: int,
        dest: int,
        directed: bool = False,
        weight: float = 0.0,
    ) -> None:
        """Add an edge; an undirected edge is stored in both directions."""
        self._check(origin)
        self._check(dest)
        needed = {origin: 1}
        if not directed:
            needed[dest] = needed.get(dest, 0) + 1
        for vertex, extra in needed.items():
            if len(self._edges[vertex]) + extra > self.max_degree:
                raise OverflowError(f"vertex {vertex} is at its maximum degree")
        self._store(origin, dest, weight)
        if not directed:
            self._store(dest, origin, weight)

    def _store(self, origin: int, dest: int, weight: float) -> None:
        self._edges[origin].append(dest)
        if self.weighted:
            self._weights[origin].append(float(weight))

    def degree(self, vertex: int) -> int:
        self._check(vertex)
        return len(self._edges[vertex])

    def edges(self, vertex: int) -> list[tuple[int, Optional[float]]]:
        """``(dest, weight)`` pairs in insertion order; weight is None if unweighted."""
        self._check(vertex)
        if self.weighted:
            return list(zip(self._edges[vertex], self._weights[vertex]))
        return [(dest, None) for dest in self._edges[vertex]]