"""An unbalanced binary search tree ordered by item keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

from dsa.element import MutableKeyed


class TraverseAlgorithm(IntEnum):
    """Order in which ``Tree.traverse`` visits the nodes."""

    IN_ORDER = 0
    PRE_ORDER = 1
    POST_ORDER = 2


@dataclass(eq=False)
class Node:
    """A tree node: smaller keys go left, equal or larger keys go right."""

    item: MutableKeyed
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)

    @property
    def key(self) -> int:
        return self.item.key


class Tree:
    """Binary search tree of keyed items; duplicate keys are allowed."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def insert(self, item: MutableKeyed) -> None:
        """Insert an item, descending right on equal keys."""
        new_node = Node(item)
        if self.root is None:
            self.root = new_node
            return

        current = self.root
        while True:
            if item.key < current.key:
                if current.left is None:
                    current.left = new_node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    break
                current = current.right
        new_node.parent = current

    def search(self, key: int) -> Node | None:
        """Return the first node found holding ``key``, or None."""
        current = self.root
        while current is not None:
            if key > current.key:
                current = current.right
            elif key < current.key:
                current = current.left
            else:
                return current
        return None

    def remove(self, key: int) -> None:
        """Remove the first node found holding ``key``; absent keys are ignored."""
        node = self.search(key)
        if node is None:
            return

        parent = node.parent
        replacement = self._detach(node)
        if replacement is not None:
            replacement.parent = parent
        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        node.parent = None

    def traverse(self, algorithm: TraverseAlgorithm | int) -> str:
        """Render the keys as ``"[k] "`` fragments in the chosen order."""
        walkers = {
            TraverseAlgorithm.IN_ORDER: self._in_order,
            TraverseAlgorithm.PRE_ORDER: self._pre_order,
            TraverseAlgorithm.POST_ORDER: self._post_order,
        }
        walker = walkers.get(algorithm)
        if walker is None:
            return "unknown traversal algorithm"
        return "".join(f"[{node.key}] " for node in walker())

    def _detach(self, node: Node) -> Node | None:
        """Unlink ``node`` and return the subtree that takes its place."""
        if node.right is None:
            replacement = node.left
            node.left = None
            return replacement

        successor = node.right
        while successor.left is not None:
            successor = successor.left

        if successor.parent is not node:
            successor_parent = successor.parent
            successor_parent.left = successor.right
            if successor.right is not None:
                successor.right.parent = successor_parent
            successor.right = node.right
            node.right.parent = successor

        successor.left = node.left
        if node.left is not None:
            node.left.parent = successor
        node.left = None
        node.right = None
        return successor

    def _in_order(self) -> Iterator[Node]:
        pending: list[Node] = []
        current = self.root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current
            current = current.right

    def _pre_order(self) -> Iterator[Node]:
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            yield node
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def _post_order(self) -> Iterator[Node]:
        pending = [self.root] if self.root is not None else []
        reverse: list[Node] = []
        while pending:
            node = pending.pop()
            reverse.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        yield from reversed(reverse)