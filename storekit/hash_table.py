"""A fixed-bucket hash table with chained entries and pluggable hashing."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Tuple

from storekit.common import NO_BUCKETS
from storekit.linked_list import LinkedList


@dataclass
class _Entry:
    key: Any
    value: Any


class HashTable:
    """Hash table with ``NO_BUCKETS`` chained buckets.

    New entries are placed at the front of their bucket, so keys, values
    and items come out bucket by bucket, newest first within a bucket.
    """

    def __init__(
        self,
        hash_func: Callable[[Any], int],
        eq: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        self._hash = hash_func
        self._eq = eq if eq is not None else operator.eq
        self._buckets: List[List[_Entry]] = [[] for _ in range(NO_BUCKETS)]
        self._size = 0

    def _bucket(self, key: Any) -> List[_Entry]:
        return self._buckets[self._hash(key) % NO_BUCKETS]

    def _locate(self, key: Any) -> Tuple[List[_Entry], Optional[int]]:
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if self._eq(entry.key, key):
                return bucket, position
        return bucket, None

    def _find(self, key: Any) -> Optional[_Entry]:
        bucket, position = self._locate(key)
        return None if position is None else bucket[position]

    def _entries(self) -> Iterator[_Entry]:
        for bucket in self._buckets:
            yield from bucket

    def insert(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any value already stored."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._bucket(key).insert(0, _Entry(key, value))
        self._size += 1

    def insert_freq(self, key: Any) -> int:
        """Count one more occurrence of ``key`` and return its new count."""
        entry = self._find(key)
        if entry is not None:
            entry.value += 1
            return entry.value
        self._bucket(key).insert(0, _Entry(key, 1))
        self._size += 1
        return 1

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` when it is absent."""
        entry = self._find(key)
        return default if entry is None else entry.value

    def lookup(self, key: Any) -> Any:
        """Return the value for ``key``; raise KeyError when it is absent."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; absent keys are ignored."""
        bucket, position = self._locate(key)
        if position is None:
            return None
        entry = bucket.pop(position)
        self._size -= 1
        return entry.value

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has_key(key)

    def is_empty(self) -> bool:
        """Return True when the table holds no entries."""
        return self._size == 0

    def clear(self) -> None:
        """Remove every entry but keep the table usable."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def keys(self) -> LinkedList:
        """Return all keys, in the same order as :meth:`values`."""
        result = LinkedList(self._eq)
        for entry in self._entries():
            result.append(entry.key)
        return result

    def values(self) -> LinkedList:
        """Return all values, in the same order as :meth:`keys`."""
        result = LinkedList(self._eq)
        for entry in self._entries():
            result.append(entry.value)
        return result

    def items(self) -> List[Tuple[Any, Any]]:
        """Return all ``(key, value)`` pairs in table order."""
        return [(entry.key, entry.value) for entry in self._entries()]

    def has_key(self, key: Any) -> bool:
        """Return True if ``key`` is stored in the table."""
        return self._find(key) is not None

    def has_value(self, value: Any) -> bool:
        """Return True if some entry's value equals ``value`` by the table's equality."""
        return any(self._eq(entry.value, value) for entry in self._entries())

    def all(self, predicate: Callable[[Any, Any], bool]) -> bool:
        """Return True if ``predicate(key, value)`` holds for every entry."""
        return all(predicate(entry.key, entry.value) for entry in self._entries())

    def any(self, predicate: Callable[[Any, Any], bool]) -> bool:
        """Return True if ``predicate(key, value)`` holds for some entry."""
        return any(predicate(entry.key, entry.value) for entry in self._entries())

    def apply_to_all(self, function: Callable[[Any, Any], Any]) -> None:
        """Replace every value with ``function(key, value)``."""
        for entry in self._entries():
            entry.value = function(entry.key, entry.value)