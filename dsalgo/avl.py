"""Self-balancing AVL search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class AVLNode:
    """A tree node; ``height`` counts nodes on the longest downward path."""

    key: Any
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    height: int = 1


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: AVLNode) -> AVLNode:
    child = node.left
    node.left = child.right
    child.right = node
    _update(node)
    _update(child)
    return child


def _rotate_left(node: AVLNode) -> AVLNode:
    child = node.right
    node.right = child.left
    child.left = node
    _update(node)
    _update(child)
    return child


def _insert(node: Optional[AVLNode], key: Any) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        node = node.left if node.left is not None else node.right
    else:
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)

    if node is None:
        return None

    _update(node)
    balance = _balance(node)
    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _brackets(node: AVLNode) -> str:
    parts = [f" ( {node.key} "]
    for child in (node.left, node.right):
        parts.append(" () " if child is None else _brackets(child))
    parts.append(") ")
    return "".join(parts)


class AVLTree:
    """An AVL tree holding distinct, ordered keys."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0

    def insert(self, key: Any) -> None:
        """Add ``key``; a key already present is left as it is."""
        if key in self:
            return
        self.root = _insert(self.root, key)
        self._size += 1

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present."""
        if key not in self:
            return
        self.root = _delete(self.root, key)
        self._size -= 1

    def search(self, key: Any) -> Optional[AVLNode]:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        pending: list[AVLNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self.root) - 1

    def balance_factor(self) -> int:
        """Left height minus right height at the root; 0 when empty."""
        return _balance(self.root)

    def to_brackets(self) -> str:
        """Render the tree in pre-order with brackets around each subtree."""
        if self.root is None:
            return ""
        return _brackets(self.root)