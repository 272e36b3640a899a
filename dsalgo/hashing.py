"""Hash table with separate chaining by remainder."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional


class ChainedHashTable:
    """Integers hashed by ``item % buckets`` into chains kept in insertion order."""

    def __init__(self, buckets: int, capacity: Optional[int] = None) -> None:
        if buckets < 1:
            raise ValueError("buckets must be positive")
        self._chains: list[list[int]] = [[] for _ in range(buckets)]
        self.capacity = capacity
        self._count = 0

    def put(self, item: int) -> bool:
        """Store ``item``; return False when the table is already at capacity."""
        if self.capacity is not None and self._count >= self.capacity:
            return False
        self._chains[item % len(self._chains)].append(item)
        self._count += 1
        return True

    def bucket(self, index: int) -> tuple[int, ...]:
        if not 0 <= index < len(self._chains):
            raise IndexError(f"bucket {index} out of range")
        return tuple(self._chains[index])

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        for chain in self._chains:
            yield from chain

    def format(self) -> str:
        """One line per bucket: ``index -> v1 -> v2 -> \\``."""
        return "".join(
            f"{index}" + "".join(f" -> {value}" for value in chain) + " -> \\\n"
            for index, chain in enumerate(self._chains)
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Read test cases from stdin and print each resulting table."""
    parser = argparse.ArgumentParser(
        description="Print chained hash tables built from stdin."
    )
    parser.parse_args(argv)
    numbers = iter(int(token) for token in sys.stdin.read().split())
    cases = next(numbers, 0)
    for _ in range(cases):
        buckets = next(numbers)
        count = next(numbers)
        table = ChainedHashTable(buckets, count)
        for _ in range(count):
            table.put(next(numbers))
        sys.stdout.write(table.format())
        sys.stdout.write("\n")
    return 0