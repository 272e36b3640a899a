"""Plain binary tree functions: building, traversal and bracket notation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence


@dataclass
class TreeNode:
    """A binary tree node."""

    item: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def from_layers(values: Sequence[Any]) -> Optional[TreeNode]:
    """Build a tree level by level: the children of ``values[i]`` are at 2i+1 and 2i+2."""
    nodes = [TreeNode(value) for value in values]
    for index, node in enumerate(nodes):
        left, right = 2 * index + 1, 2 * index + 2
        if left < len(nodes):
            node.left = nodes[left]
        if right < len(nodes):
            node.right = nodes[right]
    return nodes[0] if nodes else None


def product(root: Optional[TreeNode]) -> Any:
    """Item times the larger product among its subtrees; a leaf yields its item."""
    if root is None:
        raise ValueError("product of an empty tree")
    children = [product(child) for child in (root.left, root.right) if child is not None]
    return root.item * max(children) if children else root.item


def search(root: Optional[TreeNode], item: Any) -> Optional[TreeNode]:
    """Find ``item`` in an ordered tree; None when absent."""
    node = root
    while node is not None and node.item != item:
        node = node.left if node.item > item else node.right
    return node


def add(root: Optional[TreeNode], item: Any) -> TreeNode:
    """Insert ``item`` in order (equal items go right) and return the root."""
    new = TreeNode(item)
    if root is None:
        return new
    node = root
    while True:
        if node.item > item:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def _in_order(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _in_order(node.left)
        yield node.item
        yield from _in_order(node.right)


def _pre_order(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.item
        yield from _pre_order(node.left)
        yield from _pre_order(node.right)


def _post_order(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _post_order(node.left)
        yield from _post_order(node.right)
        yield node.item


def in_order(root: Optional[TreeNode]) -> list[Any]:
    return list(_in_order(root))


def pre_order(root: Optional[TreeNode]) -> list[Any]:
    return list(_pre_order(root))


def post_order(root: Optional[TreeNode]) -> list[Any]:
    return list(_post_order(root))


def is_ordered(root: Optional[TreeNode]) -> bool:
    """Check, at every node with two children, left <= item <= right."""
    if root is None:
        return True
    if root.left is not None and root.right is not None:
        if root.left.item > root.item or root.right.item < root.item:
            return False
    return is_ordered(root.left) and is_ordered(root.right)


def to_brackets(root: Optional[TreeNode]) -> str:
    """Pre-order rendering with each subtree in brackets and ``()`` for empty."""
    parts = [" ("]
    if root is not None:
        parts.append(f" {root.item} ")
        parts.append(" ()" if root.left is None else to_brackets(root.left))
        parts.append(" ")
        parts.append(" ()" if root.right is None else to_brackets(root.right))
    parts.append(" )")
    return "".join(parts)


def _parse(text: str, pos: int) -> tuple[Optional[TreeNode], int]:
    if pos >= len(text) or text[pos] != "(":
        raise ValueError(f"expected '(' at position {pos}")
    pos += 1
    if pos < len(text) and text[pos] == ")":
        return None, pos + 1
    end = text.find("(", pos)
    if end == -1:
        raise ValueError(f"missing subtree after position {pos}")
    token = text[pos:end]
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"invalid node value {token!r}") from None
    left, pos = _parse(text, end)
    right, pos = _parse(text, pos)
    if pos >= len(text) or text[pos] != ")":
        raise ValueError(f"expected ')' at position {pos}")
    return TreeNode(value, left, right), pos + 1


def parse_brackets(text: str) -> Optional[TreeNode]:
    """Parse ``(value(left)(right))`` notation; whitespace is ignored."""
    compact = "".join(text.split())
    root, end = _parse(compact, 0)
    if end != len(compact):
        raise ValueError(f"unexpected text at position {end}")
    return root


def depth_of(root: Optional[TreeNode], key: Any) -> int:
    """Depth of the last node holding ``key`` in pre-order; -1 when absent."""
    found = -1
    pending = [(root, 0)] if root is not None else []
    while pending:
        node, depth = pending.pop()
        if node.item == key:
            found = depth
        if node.right is not None:
            pending.append((node.right, depth + 1))
        if node.left is not None:
            pending.append((node.left, depth + 1))
    return found