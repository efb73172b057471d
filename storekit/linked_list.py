"""A singly linked list with a pluggable equality function."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Callable, Iterator, Optional

from storekit.iterator import ListIterator


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list with O(1) append, prepend and length."""

    def __init__(self, eq: Optional[Callable[[Any, Any], bool]] = None) -> None:
        self._eq = eq if eq is not None else operator.eq
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        return next(islice(self._nodes(), index, None))

    def _insert_after(self, prev: Optional[_Node], value: Any) -> _Node:
        """Link a new node after ``prev``, or at the head when ``prev`` is None."""
        if prev is None:
            node = _Node(value, self._head)
            self._head = node
        else:
            node = _Node(value, prev.next)
            prev.next = node
        if node.next is None:
            self._tail = node
        self._size += 1
        return node

    def _unlink_after(self, prev: Optional[_Node]) -> _Node:
        """Unlink the node after ``prev``, or the head when ``prev`` is None."""
        target = self._head if prev is None else prev.next
        if target is None:
            raise IndexError("no element to remove")
        if prev is None:
            self._head = target.next
        else:
            prev.next = target.next
        if target is self._tail:
            self._tail = prev
        self._size -= 1
        return target

    def _check_index(self, index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise IndexError(f"list index {index} out of range")

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        self._insert_after(self._tail, value)

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        self._insert_after(None, value)

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index`` (0..len)."""
        self._check_index(index, self._size + 1)
        prev = None if index == 0 else self._node_at(index - 1)
        self._insert_after(prev, value)

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index`` (0..len-1)."""
        self._check_index(index, self._size)
        prev = None if index == 0 else self._node_at(index - 1)
        return self._unlink_after(prev).value

    def get(self, index: int) -> Any:
        """Return the element at ``index`` (0..len-1)."""
        self._check_index(index, self._size)
        return self._node_at(index).value

    def contains(self, element: Any) -> bool:
        """Return True if any element equals ``element`` by the list's equality."""
        return any(self._eq(node.value, element) for node in self._nodes())

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self._size == 0

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0

    def all(self, predicate: Callable[[Any], bool]) -> bool:
        """Return True if ``predicate`` holds for every element."""
        return all(predicate(value) for value in self)

    def any(self, predicate: Callable[[Any], bool]) -> bool:
        """Return True if ``predicate`` holds for at least one element."""
        return any(predicate(value) for value in self)

    def apply_to_all(self, function: Callable[[Any], Any]) -> None:
        """Replace every element with ``function(element)``."""
        for node in self._nodes():
            node.value = function(node.value)

    def iterator(self) -> ListIterator:
        """Return a cursor positioned at the first element."""
        return ListIterator(self)