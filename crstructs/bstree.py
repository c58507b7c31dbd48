"""Binary search tree map with unique keys and an adjustable ordering."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterator
from typing import Any

from crstructs.treenode import Node, Position
from crstructs.utils import ErrorMsg, err_msg

__all__ = ["BSTree"]

Pair = tuple[Any, Any]


class BSTree:
    """An ordered map on an unbalanced binary search tree.

    ``compare(a, b)`` returns True when key ``a`` is ordered before key ``b``;
    two keys are equal when neither is ordered before the other.
    """

    def __init__(self, compare: Callable[[Any, Any], bool] | None = None) -> None:
        self._comp: Callable[[Any, Any], bool] = compare if compare is not None else operator.lt
        self._root: Node | None = None
        self._size = 0

    # -- positions ---------------------------------------------------------

    def begin(self) -> Position:
        """Return the position of the first key in order, or the end when empty."""
        node = self._root
        if node is None:
            return Position(None)
        while node.left is not None:
            node = node.left
        return Position(node)

    def end(self) -> Position:
        """Return the position one past the last key."""
        return Position(None)

    def root(self) -> Position:
        """Return the position of the root, or the end when empty."""
        return Position(self._root)

    # -- size and membership -----------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[Pair]:
        stack: list[Node] = []
        node = self._root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield (node.key, node.value)
            node = node.right

    def __contains__(self, key: Any) -> bool:
        return self.search(key).node is not None

    def __repr__(self) -> str:
        return f"BSTree({list(self)!r})"

    # -- lookup ------------------------------------------------------------

    def _start(self, start: Position | None) -> Node | None:
        if start is None or start.node is None:
            return self._root
        return start.node

    def _key_eq(self, k1: Any, k2: Any) -> bool:
        return not self._comp(k1, k2) and not self._comp(k2, k1)

    def search(self, key: Any, start: Position | None = None) -> Position:
        """Return the position of ``key`` below ``start`` (the root by default), or the end."""
        node = self._start(start)
        while node is not None and not self._key_eq(key, node.key):
            node = node.left if self._comp(key, node.key) else node.right
        return Position(node)

    def search_r(self, key: Any, start: Position | None = None) -> Position:
        """Recursive form of :meth:`search`."""
        return Position(self._search_node(key, self._start(start)))

    def _search_node(self, key: Any, node: Node | None) -> Node | None:
        if node is None or self._key_eq(key, node.key):
            return node
        if self._comp(key, node.key):
            return self._search_node(key, node.left)
        return self._search_node(key, node.right)

    # -- traversals --------------------------------------------------------

    def in_order(self, start: Position | None = None) -> list[Pair]:
        """Return the pairs of the subtree at ``start`` in key order, using a stack."""
        result: list[Pair] = []
        stack: list[Node] = []
        node = self._start(start)
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append((node.key, node.value))
            node = node.right
        return result

    def in_order_morris(self, start: Position | None = None) -> list[Pair]:
        """Return the pairs in key order using threaded (Morris) traversal."""
        result: list[Pair] = []
        current = self._start(start)
        while current is not None:
            if current.left is None:
                result.append((current.key, current.value))
                current = current.right
                continue
            prev = current.left
            while prev.right is not None and prev.right is not current:
                prev = prev.right
            if prev.right is None:
                prev.right = current
                current = current.left
            else:
                prev.right = None
                result.append((current.key, current.value))
                current = current.right
        return result

    def in_order_successor(self, start: Position | None = None) -> list[Pair]:
        """Return the pairs from ``start`` (the first key by default) to the last, by successors."""
        position = start if start is not None and start.node is not None else self.begin()
        result: list[Pair] = []
        while position.node is not None:
            result.append((position.key, position.value))
            position = position.successor()
        return result

    def in_order_r(self, start: Position | None = None) -> list[Pair]:
        """Recursive form of :meth:`in_order`."""
        result: list[Pair] = []

        def visit(node: Node | None) -> None:
            if node is not None:
                visit(node.left)
                result.append((node.key, node.value))
                visit(node.right)

        visit(self._start(start))
        return result

    def pre_order(self, start: Position | None = None) -> list[Pair]:
        """Return the pairs of the subtree at ``start`` node first, then left, then right."""
        node = self._start(start)
        if node is None:
            return []
        result: list[Pair] = []
        stack = [node]
        while stack:
            node = stack.pop()
            result.append((node.key, node.value))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def pre_order_r(self, start: Position | None = None) -> list[Pair]:
        """Recursive form of :meth:`pre_order`."""
        result: list[Pair] = []

        def visit(node: Node | None) -> None:
            if node is not None:
                result.append((node.key, node.value))
                visit(node.left)
                visit(node.right)

        visit(self._start(start))
        return result

    def post_order(self, start: Position | None = None) -> list[Pair]:
        """Return the pairs of the subtree at ``start`` children first, node last."""
        node = self._start(start)
        if node is None:
            return []
        pending = [node]
        collected: list[Node] = []
        while pending:
            node = pending.pop()
            collected.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return [(n.key, n.value) for n in reversed(collected)]

    def post_order_r(self, start: Position | None = None) -> list[Pair]:
        """Recursive form of :meth:`post_order`."""
        result: list[Pair] = []

        def visit(node: Node | None) -> None:
            if node is not None:
                visit(node.left)
                visit(node.right)
                result.append((node.key, node.value))

        visit(self._start(start))
        return result

    def level_order(self, start: Position | None = None) -> list[Pair]:
        """Return the pairs of the subtree at ``start`` level by level, left to right."""
        node = self._start(start)
        if node is None:
            return []
        result: list[Pair] = []
        queue: deque[Node] = deque([node])
        while queue:
            node = queue.popleft()
            result.append((node.key, node.value))
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    # -- modification ------------------------------------------------------

    def clear(self) -> None:
        """Remove every element."""
        self._root = None
        self._size = 0

    def insert(self, key: Any, value: Any) -> tuple[Position, bool]:
        """Insert ``key`` with ``value`` unless the key is present.

        Returns the position of the key and whether an insertion happened.
        """
        current = self._root
        parent: Node | None = None
        while current is not None:
            parent = current
            if self._comp(key, current.key):
                current = current.left
            elif self._comp(current.key, key):
                current = current.right
            else:
                return Position(current), False

        node = Node(key, value)
        node.parent = parent
        if parent is None:
            self._root = node
        elif self._comp(key, parent.key):
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        return Position(node), True

    def _transplant(self, src: Node | None, dest: Node) -> None:
        if dest.parent is None:
            self._root = src
        elif dest is dest.parent.left:
            dest.parent.left = src
        else:
            dest.parent.right = src
        if src is not None:
            src.parent = dest.parent

    def erase(self, position: Position) -> Position:
        """Remove the element at ``position`` and return the position that followed it."""
        node = position.node
        if node is None:
            raise IndexError(err_msg("BSTree.erase", ErrorMsg.OUT_OF_RANGE))
        following = position.successor()
        successor = following.node

        if node.left is None:
            self._transplant(node.right, node)
        elif node.right is None:
            self._transplant(node.left, node)
        else:
            assert successor is not None
            if successor is not node.right:
                self._transplant(successor.right, successor)
                successor.right = node.right
                successor.right.parent = successor
            self._transplant(successor, node)
            successor.left = node.left
            successor.left.parent = successor

        node.parent = node.left = node.right = None
        self._size -= 1
        return following

    def erase_key(self, key: Any) -> int:
        """Remove the element with ``key``; return how many were removed (0 or 1)."""
        position = self.search(key)
        if position.node is None:
            return 0
        self.erase(position)
        return 1

    # -- misc --------------------------------------------------------------

    def key_comp(self) -> Callable[[Any, Any], bool]:
        """Return the function that orders keys."""
        return self._comp

    def copy(self) -> BSTree:
        """Return an independent tree with the same shape, keys and values."""
        duplicate = BSTree(self._comp)
        for key, value in self.pre_order():
            duplicate.insert(key, value)
        return duplicate

    __copy__ = copy

    def __str__(self) -> str:
        return "".join(f"{{{key}: {value}}} -> " for key, value in self)

    def print(self) -> None:
        """Print the elements in key order."""
        if not self._size:
            print("Nothing to print, tree is empty")
            return
        print(self)