"""Nodes of a binary search tree and positions that walk them in order."""

from __future__ import annotations

from typing import Any

from crstructs.utils import ErrorMsg, err_msg

__all__ = ["Node", "Position"]


class Node:
    """A tree node holding a key, its value and links to parent and children."""

    __slots__ = ("key", "value", "parent", "left", "right")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.parent: Node | None = None
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.value!r})"


def _minimum(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _maximum(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


class Position:
    """A place in a tree: a node, or the end when the node is None.

    Positions compare equal when they refer to the same node.
    """

    __slots__ = ("node",)

    def __init__(self, node: Node | None = None) -> None:
        self.node = node

    def _require_node(self, func: str) -> Node:
        if self.node is None:
            raise IndexError(err_msg(func, ErrorMsg.OUT_OF_RANGE))
        return self.node

    @property
    def key(self) -> Any:
        """Key stored at this position."""
        return self._require_node("Position.key").key

    @property
    def value(self) -> Any:
        """Value stored at this position; it may be replaced."""
        return self._require_node("Position.value").value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._require_node("Position.value").value = new_value

    def successor(self) -> Position:
        """Return the next position in order, or the end."""
        node = self._require_node("Position.successor")
        if node.right is not None:
            return Position(_minimum(node.right))
        ancestor = node.parent
        while ancestor is not None and ancestor.left is not node:
            node = ancestor
            ancestor = ancestor.parent
        return Position(ancestor)

    def predecessor(self) -> Position:
        """Return the previous position in order, or the end."""
        node = self._require_node("Position.predecessor")
        if node.left is not None:
            return Position(_maximum(node.left))
        ancestor = node.parent
        while ancestor is not None and ancestor.right is not node:
            node = ancestor
            ancestor = ancestor.parent
        return Position(ancestor)

    def __eq__(self, other: object) -> bool:
        if other is None:
            return self.node is None
        if not isinstance(other, Position):
            return NotImplemented
        return self.node is other.node

    def __hash__(self) -> int:
        return id(self.node)

    def __bool__(self) -> bool:
        return self.node is not None

    def __repr__(self) -> str:
        if self.node is None:
            return "Position(end)"
        return f"Position({self.node.key!r}: {self.node.value!r})"