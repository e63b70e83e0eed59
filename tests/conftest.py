"""
Pytest configuration and fixtures for pylinkedlist tests.
"""

from typing import Callable

import pytest
import simpy

from pylinkedlist import NIL_ADDRESS, LinkedList


@pytest.fixture
def env() -> simpy.Environment:
    """Create a fresh SimPy environment."""
    return simpy.Environment()


@pytest.fixture
def make_list() -> Callable[..., LinkedList]:
    """Build a list and fill it with the given values."""

    def _make(*values, typed: bool = False) -> LinkedList:
        lst = LinkedList(typed=typed)
        for value in values:
            lst.insert(value)
        return lst

    return _make


@pytest.fixture
def parse_display() -> Callable[[str], list[tuple[int, str, str | None]]]:
    """Split display() output into (index, value, next_address) rows."""

    def _parse(text: str) -> list[tuple[int, str, str | None]]:
        lines = text.splitlines()
        assert lines, "display printed nothing"
        assert lines[0].startswith("Node"), f"Missing header: {lines[0]!r}"

        rows = []
        for line in lines[1:]:
            index, value, address = line.split()
            rows.append((int(index), value, None if address == NIL_ADDRESS else address))
        return rows

    return _parse

