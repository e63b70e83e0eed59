"""
Cursor - caller-owned traversal handle for LinkedList.

Each call to LinkedList.range() hands out a fresh Cursor, so any number of
traversals can be in flight over the same list at once.

Usage:
    cursor = lst.range()
    end, value = cursor()
    while not end:
        ...
        end, value = cursor()

or simply ``for value in lst.range(): ...``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pylinkedlist.linked_list import LinkedList, Node


class Cursor(Iterator):
    """
    Single-pass position in a LinkedList.

    The head is read from the list on the first call, not when the cursor
    is made. After that the cursor remembers the node it last yielded and
    asks that node for its successor, so nodes appended before the end is
    reached are still visited. Once the end has been reported the cursor
    stays exhausted.

    A node removed from the list keeps its forward link. A cursor resting on
    it moves on through that link, which may lead to nodes that were removed
    after it.
    """

    def __init__(self, source: LinkedList) -> None:
        self._source: LinkedList | None = source
        self._current: Node | None = None
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """True once the end of the chain has been reported."""
        return self._exhausted

    def __call__(self) -> tuple[bool, Any]:
        """
        Advance and return ``(end, value)``.

        ``end`` is False while real values are produced. The call after the
        last value returns ``(True, None)``, as does every later call.
        """
        if self._exhausted:
            return True, None

        if self._current is None:
            node = self._source.first()
            self._source = None
        else:
            node = self._current.suc()

        if node is None:
            self._current = None
            self._exhausted = True
            return True, None

        self._current = node
        return False, node.data

    def __iter__(self) -> Cursor:
        return self

    def __next__(self) -> Any:
        end, value = self()
        if end:
            raise StopIteration
        return value
