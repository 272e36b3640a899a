"""Binary search tree with traversals, extremes and a validity check."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

SAMPLE_VALUES = (15, 10, 20, 25, 8, 12)


class EmptyTreeError(Exception):
    """Raised when an operation needs a non-empty tree."""


@dataclass
class BSTNode:
    """A node of a binary search tree."""

    data: Any
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None


class BinarySearchTree:
    """A binary search tree; values equal to a node go to its left."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[BSTNode] = None
        for value in values:
            self.insert(value)

    def insert(self, data: Any) -> None:
        node = BSTNode(data)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if data <= current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, data: Any) -> bool:
        current = self.root
        while current is not None:
            if current.data == data:
                return True
            current = current.left if data <= current.data else current.right
        return False

    def __iter__(self) -> Iterator[Any]:
        """Yield values in order."""
        pending: list[BSTNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        levels = -1
        level = [self.root] if self.root is not None else []
        while level:
            levels += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def minimum(self) -> Any:
        if self.root is None:
            raise EmptyTreeError("Tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def maximum(self) -> Any:
        if self.root is None:
            raise EmptyTreeError("Tree is empty")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.data

    def level_order(self) -> list[Any]:
        """Values breadth first, left to right within a level."""
        result: list[Any] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def in_order(self) -> list[Any]:
        """Values in left-data-right order."""
        return list(self)

    def pre_order(self) -> list[Any]:
        """Values in data-left-right order."""
        result: list[Any] = []
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.data)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return result

    def post_order(self) -> list[Any]:
        """Values in left-right-data order."""
        result: list[Any] = []
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.data)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        result.reverse()
        return result


def is_binary_search_tree(root: Optional[BSTNode]) -> bool:
    """True when every value lies strictly between the bounds its ancestors set."""
    pending: list[tuple[BSTNode, Any, Any]] = (
        [(root, None, None)] if root is not None else []
    )
    while pending:
        node, low, high = pending.pop()
        if low is not None and not node.data > low:
            return False
        if high is not None and not node.data < high:
            return False
        if node.left is not None:
            pending.append((node.left, low, node.data))
        if node.right is not None:
            pending.append((node.right, node.data, high))
    return True


def main(argv: Optional[list[str]] = None) -> int:
    """Search the sample tree for a number given as argument or on stdin."""
    parser = argparse.ArgumentParser(
        description="Search a sample binary search tree for a number."
    )
    parser.add_argument("number", type=int, nargs="?", help="number to search")
    args = parser.parse_args(argv)
    number = args.number
    if number is None:
        print("Enter a number to be searched")
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("no number given")
        try:
            number = int(tokens[0])
        except ValueError:
            parser.error(f"not a number: {tokens[0]}")
    tree = BinarySearchTree(SAMPLE_VALUES)
    print("Found" if number in tree else "Not found")
    return 0