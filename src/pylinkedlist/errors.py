"""
Exceptions raised by LinkedList operations.

All of them derive from LinkedListError, so callers can catch the whole
family at once or pick out a single failure kind.
"""

from __future__ import annotations

from typing import Any


class LinkedListError(Exception):
    """Base class for linked list failures."""


class EmptyListError(LinkedListError):
    """Operation needs at least one node but the list has none."""

    def __init__(self, message: str = "Empty list") -> None:
        super().__init__(message)


class NodeNotFoundError(LinkedListError, LookupError):
    """No node holds the requested value."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Node does not exist: {value!r}")
        self.value = value


class MismatchedTypesError(LinkedListError, TypeError):
    """
    Value rejected by a typed list.

    Attributes:
        got: Type of the value that was offered.
        expected: Type established by the first value in the list.
    """

    def __init__(self, got: type, expected: type) -> None:
        super().__init__(
            f"Cannot insert value of type ({got.__name__}) "
            f"into list having type ({expected.__name__}): Mismatched types"
        )
        self.got = got
        self.expected = expected
