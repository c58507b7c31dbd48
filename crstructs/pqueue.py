"""Priority queue kept as a binary heap in a list."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

from crstructs.utils import ErrorMsg, err_msg

__all__ = ["PQueue"]


class PQueue:
    """A priority queue; with the default ``compare`` the largest element is on top.

    ``compare(a, b)`` returns True when ``a`` has lower priority than ``b``.
    """

    def __init__(self, compare: Callable[[Any, Any], bool] | None = None) -> None:
        self._comp: Callable[[Any, Any], bool] = compare if compare is not None else operator.lt
        self._heap: list[Any] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements in heap order."""
        return iter(list(self._heap))

    def __repr__(self) -> str:
        return f"PQueue({self._heap!r})"

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            best = i
            if left < size and self._comp(heap[best], heap[left]):
                best = left
            if right < size and self._comp(heap[best], heap[right]):
                best = right
            if best == i:
                return
            heap[i], heap[best] = heap[best], heap[i]
            i = best

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if not self._comp(heap[parent], heap[i]):
                return
            heap[parent], heap[i] = heap[i], heap[parent]
            i = parent

    def top(self) -> Any:
        """Return the element with the highest priority."""
        if not self._heap:
            raise IndexError(err_msg("PQueue.top", ErrorMsg.READ_FROM_EMPTY))
        return self._heap[0]

    def pop(self) -> None:
        """Remove the element with the highest priority."""
        if not self._heap:
            raise IndexError(err_msg("PQueue.pop", ErrorMsg.REMOVE_FROM_EMPTY))
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)

    def push(self, obj: Any) -> None:
        """Insert ``obj``."""
        self._heap.append(obj)
        self._sift_up(len(self._heap) - 1)

    def __str__(self) -> str:
        return "".join(f"{item} " for item in self._heap)

    def print(self) -> None:
        """Print the elements in heap order."""
        if not self._heap:
            print("Nothing to print, priority_queue is empty")
            return
        print(self)