"""Equality and hash functions shared by the list and table containers."""

from __future__ import annotations

from typing import Any

NO_BUCKETS = 5
"""Number of buckets the hash functions spread keys over."""

_HASH_MASK = (1 << 64) - 1
_DJB2_SEED = 5381


def int_eq(a: int, b: int) -> bool:
    """Return True when two integers are equal."""
    return a == b


def str_eq(a: str, b: str) -> bool:
    """Return True when two strings have the same contents."""
    return a == b


def ptr_eq(a: Any, b: Any) -> bool:
    """Return True when both arguments are the very same object."""
    return a is b


def hash_int(key: int) -> int:
    """Map an integer key to a bucket index in ``range(NO_BUCKETS)``."""
    return key % NO_BUCKETS


def hash_str(key: str) -> int:
    """Map a string key to a bucket index using the djb2 hash."""
    value = _DJB2_SEED
    for byte in key.encode("utf-8"):
        value = (value * 33 + byte) & _HASH_MASK
    return value % NO_BUCKETS