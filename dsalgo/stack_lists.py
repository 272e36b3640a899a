"""A stack of integer lists driven by PUSH and POP commands."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Iterable, Optional

from dsalgo.stack import StackOverflowError, StackUnderflowError

MAX_LISTS = 1000
EMPTY_MESSAGE = "EMPTY STACK"


class ListStack:
    """A bounded stack whose entries are lists of integers."""

    def __init__(self, capacity: int = MAX_LISTS) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._lists: list[list[int]] = []

    def push(self, items: Iterable[int]) -> None:
        if len(self._lists) >= self.capacity:
            raise StackOverflowError("Stack overflow")
        self._lists.append(list(items))

    def pop(self) -> list[int]:
        if not self._lists:
            raise StackUnderflowError(EMPTY_MESSAGE)
        return self._lists.pop()

    def __len__(self) -> int:
        return len(self._lists)


def run_commands(lines: Iterable[str]) -> list[str]:
    """Run PUSH/POP commands and return the lines that POP prints.

    PUSH takes the numbers on the rest of its line, or on the next
    non-blank line when nothing follows it. Unknown words are ignored.
    """
    stack = ListStack()
    output: list[str] = []
    source = iter(lines)
    for line in source:
        tokens = deque(line.split())
        while tokens:
            command = tokens.popleft()
            if command == "PUSH":
                values = list(tokens)
                tokens.clear()
                while not values:
                    following = next(source, None)
                    if following is None:
                        raise ValueError("PUSH without values")
                    values = following.split()
                stack.push(int(value) for value in values)
            elif command == "POP":
                try:
                    output.append(" ".join(str(value) for value in stack.pop()))
                except StackUnderflowError:
                    output.append(EMPTY_MESSAGE)
    return output


def main(argv: Optional[list[str]] = None) -> int:
    """Read commands from stdin and print what each POP yields."""
    parser = argparse.ArgumentParser(
        description="Run PUSH and POP commands on a stack of integer lists."
    )
    parser.parse_args(argv)
    try:
        results = run_commands(sys.stdin)
    except ValueError as error:
        parser.error(str(error))
    for line in results:
        print(line)
    return 0