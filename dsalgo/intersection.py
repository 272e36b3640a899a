"""Sorted intersection of two integer lists."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

LIST_LENGTH = 20


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Distinct values found in both inputs, in ascending order."""
    return sorted(set(first) & set(second))


def format_intersection(values: Sequence[int]) -> str:
    """One value per line, or ``VAZIO`` when there are none."""
    if not values:
        return "VAZIO\n"
    return "".join(f"{value}\n" for value in values)


def main(argv: Optional[list[str]] = None) -> int:
    """Read two lists of twenty integers from stdin and print their intersection."""
    parser = argparse.ArgumentParser(
        description="Print the sorted intersection of two integer lists."
    )
    parser.parse_args(argv)
    numbers = [int(token) for token in sys.stdin.read().split()]
    if len(numbers) < 2 * LIST_LENGTH:
        parser.error(f"expected {2 * LIST_LENGTH} integers")
    first = numbers[:LIST_LENGTH]
    second = numbers[LIST_LENGTH : 2 * LIST_LENGTH]
    sys.stdout.write(format_intersection(intersection(first, second)))
    return 0