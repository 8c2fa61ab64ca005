"""Unit tests for the arena backend (`ArenaList`).

These cover slot accounting, free-list reuse and the capacity bound.
"""

from __future__ import annotations

import pytest

from chainlist.adapters.linked_list import ArenaList
from chainlist.interfaces.linked_list import (
    AllocationError,
    IndexOutOfRangeError,
    InsertPolicy,
)

# pylint: disable=redefined-outer-name, protected-access


@pytest.fixture
def arena() -> ArenaList:
    """Return the arena list [3, 1, 4, 1, 5]."""
    lst = ArenaList()
    for value in (3, 1, 4, 1, 5):
        lst.add_to_back(value)
    return lst


class TestAccounting:
    """Live-slot accounting."""

    @staticmethod
    def test_allocated_tracks_length(arena: ArenaList) -> None:
        """Every insert takes one slot, every removal gives one back."""
        assert arena.allocated == 5
        arena.remove_from_back()
        arena.remove_at_index(2)
        assert arena.allocated == arena.length() == 3
        arena.add_to_front(7)
        assert arena.allocated == arena.length() == 4

    @staticmethod
    def test_destroy_releases_all_slots(arena: ArenaList) -> None:
        """destroy() leaves no live or free slots behind."""
        assert arena.destroy() == 5
        assert arena.allocated == 0
        assert arena._slot_value == []
        assert arena._free == []


class TestFreeList:
    """Slot reuse."""

    @staticmethod
    def test_released_slots_are_reused(arena: ArenaList) -> None:
        """The arena does not grow while freed slots are available."""
        arena.remove_from_front()
        arena.remove_from_front()
        assert len(arena._free) == 2
        arena.add_to_back(8)
        arena.add_at_index(9, 2)
        assert len(arena._slot_value) == 5
        assert arena._free == []
        assert arena.to_list() == [4, 9, 1, 5, 8]

    @staticmethod
    def test_released_slot_is_cleared(arena: ArenaList) -> None:
        """A freed slot no longer links anywhere."""
        head = arena._head
        arena.remove_from_front()
        assert head in arena._free
        assert arena._slot_next[head] is None  # type: ignore[index]


class TestCapacity:
    """The optional live-slot bound."""

    @staticmethod
    def test_full_arena_raises_allocation_error() -> None:
        """Allocating past capacity raises and leaves the list unchanged."""
        lst = ArenaList(capacity=2)
        lst.add_to_back(1)
        lst.add_to_back(2)
        for call in (
            lambda: lst.add_to_back(3),
            lambda: lst.add_to_front(3),
            lambda: lst.add_at_index(3, 2),
        ):
            with pytest.raises(AllocationError) as exc_info:
                call()
            assert exc_info.value.reason == "arena capacity of 2 slots reached"
            assert lst.to_list() == [1, 2]

    @staticmethod
    def test_capacity_frees_up_after_removal() -> None:
        """Removing an element makes room for another."""
        lst = ArenaList(capacity=1)
        lst.add_to_back(1)
        assert lst.remove_from_back() == 1
        lst.add_to_back(2)
        assert lst.to_string() == "2->NULL"

    @staticmethod
    def test_strict_range_check_precedes_allocation() -> None:
        """A bad index is reported as such even when the arena is full."""
        lst = ArenaList(insert_policy=InsertPolicy.STRICT, capacity=1)
        lst.add_to_back(1)
        with pytest.raises(IndexOutOfRangeError):
            lst.add_at_index(2, 5)

    @staticmethod
    @pytest.mark.parametrize("capacity", [0, -4])
    def test_rejects_non_positive_capacity(capacity: int) -> None:
        """Capacity must be at least one slot."""
        with pytest.raises(ValueError):
            ArenaList(capacity=capacity)

    @staticmethod
    def test_capacity_property() -> None:
        """The configured bound is exposed."""
        assert ArenaList().capacity is None
        assert ArenaList(capacity=3).capacity == 3
