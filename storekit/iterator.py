"""A cursor over a linked list that can insert and remove in place."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from storekit.linked_list import LinkedList


class ListIterator:
    """Cursor positioned on an element of a linked list.

    ``next`` returns the current element and steps forward; once past the
    last element the cursor has no current element and ``current``,
    ``next`` and ``remove`` raise IndexError.
    """

    def __init__(self, linked_list: "LinkedList") -> None:
        self._list = linked_list
        self._current = None
        self._prev = None
        self.reset()

    def _require_current(self):
        if self._current is None:
            raise IndexError("iterator has no current element")
        return self._current

    def has_next(self) -> bool:
        """Return True if there is an element after the current one."""
        return self._current is not None and self._current.next is not None

    def next(self) -> Any:
        """Return the current element and step forward one element."""
        node = self._require_current()
        self._prev, self._current = node, node.next
        return node.value

    def current(self) -> Any:
        """Return the current element."""
        return self._require_current().value

    def reset(self) -> None:
        """Move back to the first element of the list."""
        self._current = self._list._head
        self._prev = None

    def remove(self) -> Any:
        """Remove the current element; the element after it becomes current."""
        node = self._require_current()
        self._list._unlink_after(self._prev)
        self._current = node.next
        return node.value

    def insert(self, element: Any) -> None:
        """Insert ``element`` before the current one and make it current."""
        self._current = self._list._insert_after(self._prev, element)