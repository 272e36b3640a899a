"""Single-source shortest paths over an undirected weighted graph."""

from __future__ import annotations

import argparse
import math
from typing import Optional, Sequence

INT_MAX = 2147483647
UNREACHABLE = math.inf

_EXAMPLE_EDGES = (
    (0, 1, 4),
    (0, 7, 8),
    (1, 2, 8),
    (1, 7, 11),
    (2, 3, 7),
    (2, 8, 2),
    (2, 5, 4),
    (3, 4, 9),
    (3, 5, 14),
    (4, 5, 10),
    (5, 6, 2),
    (6, 7, 1),
    (6, 8, 6),
    (7, 8, 7),
)


class IndexedMinHeap:
    """A min-heap of vertices keyed by distance, supporting decrease-key."""

    def __init__(self, distances: Sequence[float]) -> None:
        self._entries: list[list] = [
            [vertex, distance] for vertex, distance in enumerate(distances)
        ]
        self._position = list(range(len(self._entries)))
        for index in reversed(range(len(self._entries) // 2)):
            self._sift_down(index)

    def _swap(self, first: int, second: int) -> None:
        entries = self._entries
        entries[first], entries[second] = entries[second], entries[first]
        self._position[entries[first][0]] = first
        self._position[entries[second][0]] = second

    def _sift_down(self, index: int) -> None:
        size = len(self._entries)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and self._entries[left][1] < self._entries[smallest][1]:
                smallest = left
            if right < size and self._entries[right][1] < self._entries[smallest][1]:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._entries[index][1] < self._entries[parent][1]:
                return
            self._swap(index, parent)
            index = parent

    def extract_min(self) -> tuple[int, float]:
        """Remove and return ``(vertex, distance)`` with the smallest distance."""
        if not self._entries:
            raise IndexError("extract from an empty heap")
        root = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
            self._position[last[0]] = 0
            self._sift_down(0)
        self._position[root[0]] = len(self._entries)
        return root[0], root[1]

    def decrease_key(self, vertex: int, distance: float) -> None:
        if vertex not in self:
            raise KeyError(vertex)
        index = self._position[vertex]
        if distance > self._entries[index][1]:
            raise ValueError("new distance is larger than the current one")
        self._entries[index][1] = distance
        self._sift_up(index)

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, int) or not 0 <= vertex < len(self._position):
            return False
        return self._position[vertex] < len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class WeightedGraph:
    """An undirected graph with weighted edges; newest edges listed first."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self._adjacency: list[list[tuple[int, float]]] = [
            [] for _ in range(vertex_count)
        ]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, dest: int, weight: float) -> None:
        self._check(source)
        self._check(dest)
        self._adjacency[source].insert(0, (dest, weight))
        self._adjacency[dest].insert(0, (source, weight))

    def neighbours(self, vertex: int) -> list[tuple[int, float]]:
        self._check(vertex)
        return list(self._adjacency[vertex])

    def dijkstra(self, source: int) -> list[float]:
        """Shortest distances from ``source``; unreachable vertices get ``inf``."""
        self._check(source)
        distances: list[float] = [UNREACHABLE] * len(self._adjacency)
        distances[source] = 0
        heap = IndexedMinHeap(distances)
        while len(heap):
            vertex, distance = heap.extract_min()
            if distance == UNREACHABLE:
                continue
            for neighbour, weight in self._adjacency[vertex]:
                candidate = distance + weight
                if neighbour in heap and candidate < distances[neighbour]:
                    distances[neighbour] = candidate
                    heap.decrease_key(neighbour, candidate)
        return distances


def format_distances(distances: Sequence[float]) -> str:
    """Tabulate distances; an unreachable vertex shows ``INT_MAX``."""
    lines = ["Vertex Distance from Source\n"]
    for vertex, distance in enumerate(distances):
        shown = INT_MAX if distance == UNREACHABLE else distance
        lines.append(f"{vertex} \t\t {shown}\n")
    return "".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    """Print shortest distances over the nine-vertex example graph."""
    parser = argparse.ArgumentParser(
        description="Shortest paths over a nine-vertex example graph."
    )
    parser.add_argument("--source", type=int, default=0, help="source vertex")
    args = parser.parse_args(argv)
    graph = WeightedGraph(9)
    for source, dest, weight in _EXAMPLE_EDGES:
        graph.add_edge(source, dest, weight)
    if not 0 <= args.source < 9:
        parser.error("source must be between 0 and 8")
    print(format_distances(graph.dijkstra(args.source)), end="")
    return 0