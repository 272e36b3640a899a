"""Per-level maximum and minimum of a tree stored as an indexed node table."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

NO_CHILD = -1


@dataclass(frozen=True)
class IndexedNode:
    """A node whose children are indices into the table, ``-1`` for none."""

    value: int
    left: int = NO_CHILD
    right: int = NO_CHILD


def _levels(nodes: Sequence[IndexedNode]) -> Iterator[list[int]]:
    for node in nodes:
        for child in (node.left, node.right):
            if child != NO_CHILD and not 0 <= child < len(nodes):
                raise ValueError(f"child index {child} out of range")
    if not nodes:
        return
    seen = {0}
    level = [0]
    while level:
        yield [nodes[index].value for index in level]
        following = []
        for index in level:
            for child in (nodes[index].left, nodes[index].right):
                if child == NO_CHILD:
                    continue
                if child in seen:
                    raise ValueError(f"node {child} is reached twice")
                seen.add(child)
                following.append(child)
        level = following


def tree_height(nodes: Sequence[IndexedNode]) -> int:
    """Number of levels below and including node 0; 0 for an empty table."""
    return sum(1 for _ in _levels(nodes))


def level_extremes(nodes: Sequence[IndexedNode]) -> list[tuple[int, int]]:
    """``(maximum, minimum)`` of each level, from the root down."""
    return [(max(values), min(values)) for values in _levels(nodes)]


def format_levels(extremes: Sequence[tuple[int, int]]) -> str:
    return "".join(
        f"Nivel {level}: Maior = {maximum}, Menor = {minimum}\n"
        for level, (maximum, minimum) in enumerate(extremes, start=1)
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Read a node count and ``value left right`` triples from stdin."""
    parser = argparse.ArgumentParser(
        description="Print the largest and smallest value on each tree level."
    )
    parser.parse_args(argv)
    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError as error:
        parser.error(str(error))
    if not numbers:
        parser.error("missing node count")
    count = numbers[0]
    fields = numbers[1 : 1 + 3 * count]
    if len(fields) < 3 * count:
        parser.error(f"expected {count} nodes")
    nodes = [IndexedNode(*fields[i : i + 3]) for i in range(0, len(fields), 3)]
    try:
        sys.stdout.write(format_levels(level_extremes(nodes)))
    except ValueError as error:
        parser.error(str(error))
    return 0