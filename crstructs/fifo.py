"""First-in, first-out queue."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator
from typing import Any

from crstructs.utils import ErrorMsg, err_msg

__all__ = ["Queue", "main"]


class Queue:
    """A queue: elements enter at the back and leave from the front."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def front(self) -> Any:
        """Return the element at the front."""
        if not self._items:
            raise IndexError(err_msg("Queue.front", ErrorMsg.READ_FROM_EMPTY))
        return self._items[0]

    def back(self) -> Any:
        """Return the element at the back."""
        if not self._items:
            raise IndexError(err_msg("Queue.back", ErrorMsg.READ_FROM_EMPTY))
        return self._items[-1]

    def push(self, element: Any) -> None:
        """Add ``element`` at the back."""
        self._items.append(element)

    def pop(self) -> None:
        """Remove the element at the front."""
        if not self._items:
            raise IndexError(err_msg("Queue.pop", ErrorMsg.REMOVE_FROM_EMPTY))
        self._items.popleft()

    def __str__(self) -> str:
        return "".join(f"{item}<--" for item in self._items)

    def print(self) -> None:
        """Print the elements from front to back."""
        if not self._items:
            print("Queue is empty, nothing to print")
            return
        print(self)


def main(argv: list[str] | None = None) -> int:
    """Exercise the queue operations and print the results."""
    _ = sys.argv[1:] if argv is None else argv
    rule = "-" * 29
    q = Queue()

    print("BEGIN TEST")
    print("PUSHING...")
    for value in (1, 2, 3):
        q.push(value)
    print(rule)
    print(f"empty: {int(not q)}")
    print(f"size: {len(q)}")
    print(f"front: {q.front()}")
    print(f"back: {q.back()}")
    print("printing...")
    q.print()
    print(rule)

    print("POPPING...")
    for _ in range(3):
        q.pop()
    print(rule)
    print(f"empty: {int(not q)}")
    print(f"size: {len(q)}")
    print("printing...")
    q.print()
    print(rule)

    print("TEST COMPLETE")
    return 0


if __name__ == "__main__":
    sys.exit(main())