"""
pylinkedlist - singly linked list container.

Insertion, display, deletion, duplicate removal and caller-owned cursors
over a chain of nodes, with an optional runtime type check.
"""

from pylinkedlist.cursor import Cursor
from pylinkedlist.errors import (
    EmptyListError,
    LinkedListError,
    MismatchedTypesError,
    NodeNotFoundError,
)
from pylinkedlist.linked_list import NIL_ADDRESS, LinkedList, Node, create_list

__version__ = "0.1.0"
__all__ = [
    # Container
    "LinkedList",
    "Node",
    "Cursor",
    "create_list",
    "NIL_ADDRESS",
    # Errors
    "LinkedListError",
    "EmptyListError",
    "NodeNotFoundError",
    "MismatchedTypesError",
]
