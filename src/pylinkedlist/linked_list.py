"""
LinkedList - singly linked list with an optional homogeneity check.

A list created with ``typed=True`` only accepts values whose exact runtime
type matches the type of the value held by its head node.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from pylinkedlist.cursor import Cursor
from pylinkedlist.errors import EmptyListError, MismatchedTypesError, NodeNotFoundError

# Printed in place of the successor address of the last node
NIL_ADDRESS = "<nil>"

INDEX_WIDTH = 10
VALUE_WIDTH = 13
DISPLAY_HEADER = "Node     | Value       | Next Address "


class Node:
    """
    Element of a LinkedList.

    Holds a value of any type and the link to the following node.
    """

    def __init__(self, data: Any) -> None:
        self.data = data
        self._next: Node | None = None

    def suc(self) -> Node | None:
        """Return next node in the chain, or None if last."""
        return self._next

    def address(self) -> str:
        """Identity of this node, rendered like a pointer."""
        return f"{id(self):#x}"

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class LinkedList:
    """
    Singly linked list of Nodes.

    Keeps references to both ends of the chain. The last-node reference is
    updated by every mutation, so the final node always has no successor.
    """

    def __init__(self, typed: bool = False) -> None:
        self._first: Node | None = None
        self._last: Node | None = None
        self._typed = typed

    @property
    def typed(self) -> bool:
        """Whether inserted values must share the head value's type."""
        return self._typed

    def first(self) -> Node | None:
        """Return head node."""
        return self._first

    def last(self) -> Node | None:
        """Return last node."""
        return self._last

    def empty(self) -> bool:
        """Check if list is empty."""
        return self._first is None

    def _check_empty(self) -> None:
        if self._first is None:
            raise EmptyListError()

    def insert(self, value: Any) -> None:
        """
        Append value at the end of the list.

        On a typed list every value after the first must have exactly the
        type of the head's value.

        Raises:
            MismatchedTypesError: Typed list and the type differs. The list
                is left untouched.
        """
        if self._first is not None and self._typed:
            expected = type(self._first.data)
            if type(value) is not expected:
                raise MismatchedTypesError(type(value), expected)

        node = Node(value)
        if self._last is None:
            self._first = node
        else:
            self._last._next = node
        self._last = node

    def rows(self) -> list[tuple[int, Any, str | None]]:
        """
        Describe every node as ``(index, value, next_address)``.

        Indexes start at 1. ``next_address`` is None for the last node.
        """
        result = []
        index = 1
        node = self._first
        while node is not None:
            successor = node.suc()
            address = successor.address() if successor is not None else None
            result.append((index, node.data, address))
            node = successor
            index += 1
        return result

    def display(self, file: TextIO | None = None) -> None:
        """
        Print one line per node: index, value and successor address.

        Writes to stdout unless another text stream is given.

        Raises:
            EmptyListError: The list has no nodes.
        """
        self._check_empty()
        out = file if file is not None else sys.stdout

        print(DISPLAY_HEADER, file=out)
        for index, value, address in self.rows():
            next_address = address if address is not None else NIL_ADDRESS
            print(
                f"{index:<{INDEX_WIDTH}} {value!s:<{VALUE_WIDTH}} {next_address}",
                file=out,
            )

    def _unlink(self, prev: Node | None, node: Node) -> None:
        """
        Detach node, given the node before it (None for the head).

        The detached node keeps its own link so a cursor resting on it can
        still move on. Following that link may reach nodes that were removed
        after it, and the cursor yields those too.
        """
        if prev is None:
            self._first = node._next
        else:
            prev._next = node._next

        if self._last is node:
            self._last = prev

    def remove_node(self, value: Any) -> None:
        """
        Remove the first node whose value equals ``value``.

        Raises:
            EmptyListError: The list has no nodes.
            NodeNotFoundError: No node matches. The list is left untouched.
        """
        self._check_empty()

        prev = None
        node = self._first
        while node is not None:
            if node.data == value:
                self._unlink(prev, node)
                return
            prev = node
            node = node.suc()

        raise NodeNotFoundError(value)

    def remove_duplicates(self) -> None:
        """
        Keep only the first occurrence of every value.

        Raises:
            EmptyListError: The list has no nodes.
        """
        self._check_empty()

        seen: set[Any] = set()
        seen_unhashable: list[Any] = []

        prev = None
        node = self._first
        while node is not None:
            successor = node.suc()
            if _already_seen(node.data, seen, seen_unhashable):
                self._unlink(prev, node)
            else:
                prev = node
            node = successor

    def range(self) -> Cursor:
        """
        Start a traversal.

        Returns a new Cursor owned by the caller; see pylinkedlist.cursor.

        Raises:
            EmptyListError: The list has no nodes.
        """
        self._check_empty()
        return Cursor(self)

    def clear(self) -> None:
        """Detach all nodes."""
        node = self._first
        while node is not None:
            successor = node.suc()
            node._next = None
            node = successor

        self._first = None
        self._last = None

    def __len__(self) -> int:
        count = 0
        node = self._first
        while node is not None:
            count += 1
            node = node.suc()
        return count

    def __iter__(self) -> Iterator[Any]:
        """Iterate over stored values from head to last."""
        node = self._first
        while node is not None:
            yield node.data
            node = node.suc()

    def __contains__(self, value: Any) -> bool:
        return any(data == value for data in self)

    def __str__(self) -> str:
        return f"LinkedList({len(self)} elements)"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r}, typed={self._typed})"


def _already_seen(value: Any, seen: set[Any], seen_unhashable: list[Any]) -> bool:
    """Report whether value was met before, recording it if not."""
    try:
        if value in seen:
            return True
        seen.add(value)
        return False
    except TypeError:
        # lists, dicts and other unhashable values
        if any(value == other for other in seen_unhashable):
            return True
        seen_unhashable.append(value)
        return False


def create_list(typed: bool) -> LinkedList:
    """
    Make an empty list.

    With ``typed=True`` the list rejects values whose type differs from the
    first inserted value. With ``typed=False`` insert never fails.
    """
    return LinkedList(typed=typed)
