"""Hash multimap using separate chaining over a power-of-two bucket table."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Hashable, Iterator
from typing import Any

from crstructs.utils import ErrorMsg, err_msg

__all__ = ["HashMap"]

_INV_GOLDEN_RATIO = 0x9E3779B9
_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1


class HashMap:
    """An unordered multimap: one key may be stored several times.

    The bucket count is always a power of two; keys are spread over the
    buckets with multiply-shift hashing.
    """

    def __init__(
        self,
        count: int = 0,
        hash_function: Callable[[Any], int] | None = None,
        key_eq: Callable[[Any, Any], bool] | None = None,
    ) -> None:
        if count < 0:
            raise ValueError("count must not be negative")
        bucket_count = 1
        while bucket_count < count:
            bucket_count *= 2
        self._hash: Callable[[Any], int] = hash_function if hash_function is not None else hash
        self._key_eq: Callable[[Any, Any], bool] = key_eq if key_eq is not None else operator.eq
        self._max_load_factor = 1.0
        self._size = 0
        self._buckets: list[deque[tuple[Any, Any]]] = [deque() for _ in range(bucket_count)]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        for bucket in self._buckets:
            yield from bucket

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)

    def __repr__(self) -> str:
        return f"HashMap({list(self)!r})"

    def _hash_value(self, key: Any, count: int | None = None) -> int:
        count = count or len(self._buckets)
        count_bits = count.bit_length() - 1
        hashed = self._hash(key) & _WORD_MASK
        return ((hashed * _INV_GOLDEN_RATIO) & _WORD_MASK) >> (_WORD_BITS - count_bits)

    def clear(self) -> None:
        """Remove every element; the bucket count is kept."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def insert(self, key: Any, value: Any) -> None:
        """Add a ``key``/``value`` pair, growing the table when it gets too full."""
        self._buckets[self._hash_value(key)].appendleft((key, value))
        self._size += 1
        if self._size > self._max_load_factor * len(self._buckets):
            self.rehash(len(self._buckets) + 1)

    def erase(self, key: Any) -> int:
        """Remove every element with ``key`` and return how many were removed."""
        if not self._size:
            raise IndexError(err_msg("HashMap.erase", ErrorMsg.REMOVE_FROM_EMPTY))
        index = self._hash_value(key)
        bucket = self._buckets[index]
        kept = deque(entry for entry in bucket if not self._key_eq(entry[0], key))
        removed = len(bucket) - len(kept)
        self._buckets[index] = kept
        self._size -= removed
        return removed

    def _matches(self, key: Any) -> Iterator[tuple[Any, Any]]:
        for entry in self._buckets[self._hash_value(key)]:
            if self._key_eq(entry[0], key):
                yield entry

    def count(self, key: Any) -> int:
        """Return the number of elements stored with ``key``."""
        return sum(1 for _ in self._matches(key))

    def find(self, key: Any) -> tuple[Any, Any] | None:
        """Return the first ``(key, value)`` pair stored with ``key``, or None."""
        return next(self._matches(key), None)

    def contains(self, key: Any) -> bool:
        """Return True when an element with ``key`` is stored."""
        return any(True for _ in self._matches(key))

    def bucket_count(self) -> int:
        """Return the number of buckets."""
        return len(self._buckets)

    def bucket_size(self, bucket: int) -> int:
        """Return the number of elements in bucket number ``bucket``."""
        if not 0 <= bucket < len(self._buckets):
            raise IndexError(err_msg("HashMap.bucket_size", ErrorMsg.OUT_OF_RANGE))
        return len(self._buckets[bucket])

    def bucket(self, key: Any) -> int:
        """Return the number of the bucket that ``key`` belongs to."""
        return self._hash_value(key)

    def load_factor(self) -> float:
        """Return the average number of elements per bucket."""
        return self._size / len(self._buckets)

    @property
    def max_load_factor(self) -> float:
        """Load factor above which an insertion grows the table."""
        return self._max_load_factor

    @max_load_factor.setter
    def max_load_factor(self, ml: float) -> None:
        if ml <= 0:
            raise ValueError("max load factor must be positive")
        self._max_load_factor = float(ml)

    def rehash(self, count: int) -> None:
        """Resize the table towards ``count`` buckets while respecting the load factor."""
        if count < 0:
            raise ValueError("count must not be negative")
        current = len(self._buckets)
        needed = self._size / self._max_load_factor
        new_count = current
        if count >= current:
            while new_count < count or new_count < needed or new_count < 2:
                new_count *= 2
        else:
            while new_count >= 2 * count and new_count >= 2 * needed and new_count > 2:
                new_count //= 2
        if new_count == current:
            return
        new_buckets: list[deque[tuple[Any, Any]]] = [deque() for _ in range(new_count)]
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[self._hash_value(entry[0], new_count)].appendleft(entry)
        self._buckets = new_buckets

    def hash_function(self) -> Callable[[Any], int]:
        """Return the function used to hash keys."""
        return self._hash

    def key_eq(self) -> Callable[[Any, Any], bool]:
        """Return the function used to compare keys."""
        return self._key_eq

    def copy(self) -> HashMap:
        """Return an independent map with the same elements and settings."""
        duplicate = HashMap(len(self._buckets), self._hash, self._key_eq)
        duplicate._max_load_factor = self._max_load_factor
        duplicate._buckets = [deque(reversed(bucket)) for bucket in self._buckets]
        duplicate._size = self._size
        return duplicate

    __copy__ = copy

    def __str__(self) -> str:
        return "".join(f"{{Key: {key}, Value: {value}}}, " for key, value in self)

    def print(self) -> None:
        """Print every element, bucket by bucket."""
        if not self._size:
            print("Nothing to print, map is empty")
            return
        print(self)