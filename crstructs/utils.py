"""Error messages, ordering checks, printing helpers and small numeric helpers."""

from __future__ import annotations

import enum
import operator
import random
from collections.abc import Callable, Iterable, Mapping
from itertools import pairwise
from typing import Any

__all__ = [
    "ErrorMsg",
    "err_msg",
    "is_sorted",
    "print_contents",
    "print_associative_contents",
    "print_container",
    "print_associative_container",
    "is_odd",
    "is_even",
    "random_int",
    "median_of_3",
]

_EMPTY_CONTAINER = "Container is empty, nothing to print"


class ErrorMsg(enum.IntEnum):
    """Kinds of error that the containers report."""

    BAD_ALLOC = 0
    REMOVE_FROM_EMPTY = 1
    READ_FROM_EMPTY = 2
    OUT_OF_RANGE = 3
    OVERFLOW = 4
    UNDERFLOW = 5
    DEFAULT = 6

    @property
    def text(self) -> str:
        return _MESSAGES.get(self, "fatal error occurred")


_MESSAGES = {
    ErrorMsg.BAD_ALLOC: "memory allocation failure",
    ErrorMsg.REMOVE_FROM_EMPTY: "cannot remove element from empty object",
    ErrorMsg.READ_FROM_EMPTY: "cannot read element from empty object",
    ErrorMsg.OUT_OF_RANGE: "index out of range",
    ErrorMsg.OVERFLOW: "overflow occurred",
    ErrorMsg.UNDERFLOW: "underflow occurred",
}


def err_msg(func: str, msg: ErrorMsg = ErrorMsg.DEFAULT) -> str:
    """Build the error text reported by ``func`` for the given kind of error."""
    return f"ERROR using {func}; {ErrorMsg(msg).text}"


def is_sorted(items: Iterable[Any], less: Callable[[Any, Any], bool] | None = None) -> bool:
    """Return True when no element is ordered before its predecessor."""
    comp = less if less is not None else operator.lt
    return not any(comp(nxt, cur) for cur, nxt in pairwise(items))


def print_contents(items: Iterable[Any]) -> None:
    """Print the elements separated by spaces; print nothing when empty."""
    elements = list(items)
    if not elements:
        return
    print("".join(f"{element} " for element in elements))


def print_associative_contents(pairs: Iterable[tuple[Any, Any]]) -> None:
    """Print key/value pairs as ``{key: value}``; print nothing when empty."""
    entries = list(pairs)
    if not entries:
        return
    print("".join(f"{{{key}: {value}}} " for key, value in entries))


def print_container(container: Iterable[Any]) -> None:
    """Print the elements of a container, or a notice when it is empty."""
    elements = list(container)
    if not elements:
        print(_EMPTY_CONTAINER)
        return
    print("".join(f"{element} " for element in elements))


def print_associative_container(mapping: Mapping[Any, Any] | Iterable[tuple[Any, Any]]) -> None:
    """Print the entries of a mapping, or a notice when it is empty."""
    entries = list(mapping.items() if isinstance(mapping, Mapping) else mapping)
    if not entries:
        print(_EMPTY_CONTAINER)
        return
    print("".join(f"{{{key}: {value}}} " for key, value in entries))


def _require_int(num: Any) -> int:
    if not isinstance(num, int):
        raise TypeError(f"integer required, got {type(num).__name__}")
    return num


def is_odd(num: int) -> bool:
    """Return True for odd integers."""
    return _require_int(num) % 2 != 0


def is_even(num: int) -> bool:
    """Return True for even integers."""
    return _require_int(num) % 2 == 0


def random_int(low: int, high: int) -> int:
    """Return a uniformly chosen integer in the closed range [low, high]."""
    _require_int(low)
    _require_int(high)
    if low > high:
        raise ValueError(f"empty range: low {low} exceeds high {high}")
    return random.randint(low, high)


def median_of_3(a: Any, b: Any, c: Any) -> Any:
    """Return the median of three comparable values."""
    if (b > a) == (a > c):
        return a
    if (b > a) != (b > c):
        return b
    return c