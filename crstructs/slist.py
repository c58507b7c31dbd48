"""Singly linked list with head and tail references."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from crstructs.utils import ErrorMsg, err_msg

__all__ = ["SList", "main"]


@dataclass(slots=True)
class _Node:
    data: Any
    next: _Node | None = None


class SList:
    """A singly linked list; optionally starts with ``count`` copies of ``value``."""

    def __init__(self, count: int = 0, value: Any = None) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        self._head: _Node | None = None
        self._tail: _Node | None = None
        for _ in range(count):
            self.push_front(value)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"SList({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int, func: str) -> _Node:
        if index < 0:
            raise IndexError(err_msg(func, ErrorMsg.OUT_OF_RANGE))
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(err_msg(func, ErrorMsg.OUT_OF_RANGE))

    def front(self) -> Any:
        """Return the first element."""
        if self._head is None:
            raise IndexError(err_msg("SList.front", ErrorMsg.READ_FROM_EMPTY))
        return self._head.data

    def back(self) -> Any:
        """Return the last element."""
        if self._tail is None:
            raise IndexError(err_msg("SList.back", ErrorMsg.READ_FROM_EMPTY))
        return self._tail.data

    def at(self, index: int) -> Any:
        """Return the element at ``index``."""
        return self._node_at(index, "SList.at").data

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head

    def pop_front(self) -> None:
        """Remove the first element."""
        if self._head is None:
            raise IndexError(err_msg("SList.pop_front", ErrorMsg.REMOVE_FROM_EMPTY))
        self._head = self._head.next
        if self._head is None:
            self._tail = None

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def pop_back(self) -> None:
        """Remove the last element."""
        if self._head is None:
            raise IndexError(err_msg("SList.pop_back", ErrorMsg.REMOVE_FROM_EMPTY))
        if self._head is self._tail:
            self.clear()
            return
        node = self._head
        while node.next is not self._tail:
            node = node.next
        node.next = None
        self._tail = node

    def insert_after(self, index: int, value: Any) -> None:
        """Insert ``value`` directly after the element at ``index``."""
        node = self._node_at(index, "SList.insert_after")
        node.next = _Node(value, node.next)
        if self._tail is node:
            self._tail = node.next

    def erase_after(self, index: int) -> None:
        """Remove the element that follows the element at ``index``."""
        node = self._node_at(index, "SList.erase_after")
        victim = node.next
        if victim is None:
            raise IndexError(err_msg("SList.erase_after", ErrorMsg.OUT_OF_RANGE))
        node.next = victim.next
        if self._tail is victim:
            self._tail = node

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        previous = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head, self._tail = previous, self._head

    def copy(self) -> SList:
        """Return a new list holding the same elements."""
        duplicate = SList()
        for value in self:
            duplicate.push_back(value)
        return duplicate

    __copy__ = copy

    def __str__(self) -> str:
        return "".join(f"{value} --> " for value in self)

    def print(self) -> None:
        """Print the list as a chain of linked values."""
        if not self:
            print("Nothing to print, list is empty")
            return
        print(self)


def _report(slist: SList, *, front: bool = False, back: bool = False,
            show: bool = True) -> None:
    print(f"size: {len(slist)}")
    print(f"empty: {int(not slist)}")
    if front:
        print(f"front: {slist.front()}")
    if back:
        print(f"back: {slist.back()}")
    if show:
        print("printing... ")
        slist.print()


def main(argv: list[str] | None = None) -> int:
    """Exercise the list operations and print the results."""
    _ = sys.argv[1:] if argv is None else argv
    rule = "-" * 41
    slist = SList()
    slist2 = SList(3, 0)

    print("TEST BEGIN")
    print(rule)
    print("INITIAL SLIST...")
    print("slist: ", end="")
    slist.print()
    print(rule)

    print("INITIAL SLIST2...")
    print("slist2: ", end="")
    slist2.print()
    print(rule)

    print("PUSHING FRONT...")
    for value in (0, 5, 10):
        slist.push_front(value)
    print(rule)
    _report(slist, front=True)
    print(rule)

    print("POPPING FRONT...")
    for _ in range(3):
        slist.pop_front()
    print(rule)
    _report(slist, show=False)
    print(rule)

    print("PUSHING BACK...")
    for value in (6, 4, 2):
        slist.push_back(value)
    print(rule)
    _report(slist, back=True)
    print(rule)

    print("POPPING BACK...")
    for _ in range(3):
        slist.pop_back()
    print(rule)
    _report(slist, show=False)
    print(rule)

    print("INSERTING...")
    slist.push_front(5)
    slist.insert_after(0, 6)
    slist.insert_after(1, 7)
    slist.insert_after(2, 8)
    print(rule)
    print(f"at(0): {slist.at(0)}")
    _report(slist)
    print(rule)

    print("ERASING...")
    slist.erase_after(0)
    print(rule)
    _report(slist)
    print(rule)

    print("REVERSING...")
    slist.reverse()
    print(rule)
    print("printing... ")
    slist.print()
    print(rule)

    print("COPYING...")
    slist_copy = slist.copy()
    print(rule)
    print("printing slist... ")
    slist.print()
    print("printing slist_copy... ")
    slist_copy.print()
    print(rule)

    print("CLEARING...")
    slist.clear()
    print(rule)
    _report(slist)
    print(rule)

    print("TEST COMPLETE")
    return 0


if __name__ == "__main__":
    sys.exit(main())