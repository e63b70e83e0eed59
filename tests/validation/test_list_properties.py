"""
Behavioral checks for LinkedList across whole insert/remove scenarios.

Each scenario builds a list through the public API only and checks the
observable sequence afterwards.
"""

import io

import pytest

from pylinkedlist import (
    EmptyListError,
    MismatchedTypesError,
    NodeNotFoundError,
    create_list,
)


class TestListScenarios:
    """End-to-end list scenarios."""

    @pytest.mark.parametrize("count", [1, 2, 10, 250])
    def test_insert_round_trip(self, count: int) -> None:
        """N inserts give length N and insertion order."""
        lst = create_list(True)
        for i in range(count):
            lst.insert(i)

        assert len(lst) == count
        assert list(lst.range()) == list(range(count))

    def test_typed_list_keeps_contents_on_rejection(self) -> None:
        lst = create_list(True)
        for word in ["alpha", "beta", "gamma"]:
            lst.insert(word)

        for bad in [1, 2.5, None, b"delta", ["epsilon"]]:
            with pytest.raises(MismatchedTypesError):
                lst.insert(bad)

        assert list(lst) == ["alpha", "beta", "gamma"]

    def test_empty_list_operations(self) -> None:
        """Every guarded operation rejects a fresh list."""
        lst = create_list(False)
        for operation in (
            lambda: lst.display(file=io.StringIO()),
            lambda: lst.remove_node(1),
            lambda: lst.remove_duplicates(),
            lambda: lst.range(),
        ):
            with pytest.raises(EmptyListError):
                operation()

    def test_emptied_list_behaves_like_new(self) -> None:
        lst = create_list(False)
        lst.insert(1)
        lst.remove_node(1)

        with pytest.raises(EmptyListError):
            lst.remove_duplicates()
        lst.insert("again")
        assert list(lst) == ["again"]

    def test_mixed_workload(self, parse_display) -> None:
        """Insert, dedupe, remove and display in sequence."""
        lst = create_list(False)
        for value in [4, 8, 4, 15, 16, 8, 23, 42, 42]:
            lst.insert(value)

        lst.remove_duplicates()
        assert list(lst) == [4, 8, 15, 16, 23, 42]

        lst.remove_node(15)
        lst.remove_node(42)
        with pytest.raises(NodeNotFoundError):
            lst.remove_node(15)

        out = io.StringIO()
        lst.display(file=out)
        rows = parse_display(out.getvalue())
        assert [value for _, value, _ in rows] == ["4", "8", "16", "23"]
        assert [address is None for _, _, address in rows] == [False, False, False, True]
