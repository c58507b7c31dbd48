"""Last-in, first-out stack."""

from __future__ import annotations

import sys
from typing import Any

from crstructs.utils import ErrorMsg, err_msg

__all__ = ["Stack", "main"]


class Stack:
    """A stack whose top is the most recently pushed element."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def top(self) -> Any:
        """Return the top element."""
        if not self._items:
            raise IndexError(err_msg("Stack.top", ErrorMsg.READ_FROM_EMPTY))
        return self._items[-1]

    def pop(self) -> None:
        """Remove the top element."""
        if not self._items:
            raise IndexError(err_msg("Stack.pop", ErrorMsg.REMOVE_FROM_EMPTY))
        self._items.pop()

    def push(self, element: Any) -> None:
        """Place ``element`` on top."""
        self._items.append(element)

    def __str__(self) -> str:
        return "".join(f"{item}\n-\n" for item in reversed(self._items))

    def print(self) -> None:
        """Print the elements from top to bottom, one per level."""
        if not self._items:
            print("Stack is empty, nothing to print")
            return
        print(self, end="")


def main(argv: list[str] | None = None) -> int:
    """Exercise the stack operations and print the results."""
    _ = sys.argv[1:] if argv is None else argv
    rule = "-" * 29
    stk = Stack()

    print("BEGIN TEST")
    print("PUSHING...")
    for value in (1, 2, 3):
        stk.push(value)
    print(rule)
    print(f"size: {len(stk)}")
    print(f"top: {stk.top()}")
    print("printing...")
    stk.print()
    print(rule)

    print("POPPING...")
    for _ in range(3):
        stk.pop()
    print(rule)
    print(f"size: {len(stk)}")
    print("printing...")
    stk.print()
    print(rule)

    print("TEST COMPLETE")
    return 0


if __name__ == "__main__":
    sys.exit(main())