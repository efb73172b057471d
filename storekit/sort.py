"""Ordering helpers for table keys and shelf locations."""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple

from storekit.hash_table import HashTable
from storekit.prompts import make_int


def shelf_sort_key(shelf: str) -> Tuple[str, int]:
    """Return a key ordering shelves by leading letter, then by their number."""
    return shelf[:1], make_int(shelf[1:])


def get_keys(table: HashTable) -> List[Any]:
    """Return the keys of ``table`` as a list, in table order."""
    return list(table.keys())


def sort_keys(keys: Iterable[str]) -> List[str]:
    """Return ``keys`` sorted lexicographically."""
    return sorted(keys)


def _shelf_of(stock: Any) -> str:
    return stock if isinstance(stock, str) else stock.shelf


def sort_stock(stocks: Iterable[Any]) -> List[Any]:
    """Return stock entries (or shelf names) sorted by shelf letter and number."""
    return sorted(stocks, key=lambda stock: shelf_sort_key(_shelf_of(stock)))