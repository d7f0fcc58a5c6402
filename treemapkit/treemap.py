"""An ordered map on a binary search tree with a user-supplied ordering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

LowerThan = Callable[[Any, Any], Any]


@dataclass
class Pair:
    """A key and the value stored under it."""

    key: Any
    value: Any


@dataclass(eq=False)
class TreeNode:
    """A node of the search tree."""

    pair: Pair
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)
    parent: Optional["TreeNode"] = field(default=None, repr=False)

    @classmethod
    def create(cls, key: Any, value: Any) -> "TreeNode":
        """Build a detached node holding ``key`` and ``value``."""
        return cls(Pair(key, value))


def minimum(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the leftmost node of the subtree rooted at ``node``."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def _successor(node: TreeNode) -> Optional[TreeNode]:
    if node.right is not None:
        return minimum(node.right)
    while node.parent is not None and node.parent.right is node:
        node = node.parent
    return node.parent


class TreeMap:
    """A map whose keys are ordered by a ``lower_than(a, b)`` predicate.

    The map keeps a cursor, ``current``, that ``search``, ``insert``,
    ``upper_bound``, ``first`` and ``next`` move.
    """

    def __init__(self, lower_than: LowerThan) -> None:
        self.root: Optional[TreeNode] = None
        self.current: Optional[TreeNode] = None
        self.lower_than = lower_than

    def is_equal(self, key1: Any, key2: Any) -> bool:
        """Keys are equal when neither is lower than the other."""
        return not self.lower_than(key1, key2) and not self.lower_than(key2, key1)

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``; existing keys and None are ignored."""
        if key is None or value is None:
            return
        if self.search(key) is not None:
            return

        new = TreeNode.create(key, value)
        if self.root is None:
            self.root = new
            self.current = new
            return

        node = self.root
        while True:
            if self.lower_than(key, node.pair.key):
                if node.left is None:
                    node.left = new
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
        new.parent = node
        self.current = new

    def _replace_child(self, node: TreeNode, child: Optional[TreeNode]) -> None:
        parent = node.parent
        if node is self.root:
            self.root = child
        elif parent is not None and parent.left is node:
            parent.left = child
        elif parent is not None:
            parent.right = child
        if child is not None:
            child.parent = parent
        if self.current is node:
            self.current = None

    def remove_node(self, node: Optional[TreeNode]) -> None:
        """Unlink ``node`` from the tree."""
        if node is None:
            return
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            self._replace_child(node, child)
            return

        successor = minimum(node.right)
        assert successor is not None
        key, value = successor.pair.key, successor.pair.value
        self.remove_node(successor)
        node.pair.key = key
        node.pair.value = value

    def erase(self, key: Any) -> None:
        """Remove the entry with ``key`` if it is present."""
        if self.root is None:
            return
        if self.search(key) is None:
            return
        self.remove_node(self.current)

    def search(self, key: Any) -> Optional[Pair]:
        """Return the pair for ``key`` and move the cursor to it, or None."""
        if key is None:
            return None
        node = self.root
        while node is not None:
            if self.is_equal(key, node.pair.key):
                self.current = node
                return node.pair
            node = node.left if self.lower_than(key, node.pair.key) else node.right
        return None

    def upper_bound(self, key: Any) -> Optional[Pair]:
        """Return the pair with the smallest key not lower than ``key``."""
        if self.root is None:
            return None
        node = self.root
        bound: Optional[TreeNode] = None
        while node is not None:
            if self.is_equal(key, node.pair.key):
                self.current = node
                return node.pair
            if self.lower_than(key, node.pair.key):
                bound = node
                node = node.left
            else:
                node = node.right
        self.current = bound
        return bound.pair if bound is not None else None

    def first(self) -> Optional[Pair]:
        """Move the cursor to the lowest key and return its pair."""
        node = minimum(self.root)
        if node is None:
            return None
        self.current = node
        return node.pair

    def next(self) -> Optional[Pair]:
        """Advance the cursor to the following key and return its pair."""
        if self.current is None:
            return None
        following = _successor(self.current)
        if following is None:
            return None
        self.current = following
        return following.pair

    def __iter__(self) -> Iterator[Pair]:
        """Yield pairs in key order without moving the cursor."""
        node = minimum(self.root)
        while node is not None:
            yield node.pair
            node = _successor(node)