"""Arena implementation of the LinkedList interface.

Nodes live in two parallel slot arrays (value and successor index) owned by
the list. Released slots go onto a free-list and are reused before the arena
grows, so the number of live slots always equals the list length.

An optional ``capacity`` bounds the number of live slots; asking for one more
raises ``AllocationError`` without touching the list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chainlist.interfaces.linked_list import (
    AllocationError,
    EmptyListError,
    InsertPolicy,
    LinkedList,
    as_element,
)

logger = logging.getLogger(__name__)


class ArenaList(LinkedList):
    """LinkedList backed by an index arena with a free-list."""

    def __init__(
        self,
        insert_policy: InsertPolicy = InsertPolicy.LENIENT,
        capacity: int | None = None,
    ) -> None:
        super().__init__(insert_policy)
        if capacity is not None and capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity}")
        self._capacity = capacity
        self._slot_value: list[int] = []
        self._slot_next: list[int | None] = []
        self._free: list[int] = []
        self._head: int | None = None

    @property
    def capacity(self) -> int | None:
        """Maximum number of live slots, or None when unbounded."""
        return self._capacity

    @property
    def allocated(self) -> int:
        """Number of slots currently holding an element."""
        return len(self._slot_value) - len(self._free)

    # ---- slot management ----

    def _alloc(self, value: int) -> int:
        if self._capacity is not None and self.allocated >= self._capacity:
            raise AllocationError(f"arena capacity of {self._capacity} slots reached")
        if self._free:
            slot = self._free.pop()
            self._slot_value[slot] = value
            self._slot_next[slot] = None
            return slot
        try:
            self._slot_value.append(value)
        except MemoryError as e:
            raise AllocationError("out of memory") from e
        try:
            self._slot_next.append(None)
        except MemoryError as e:
            self._slot_value.pop()
            raise AllocationError("out of memory") from e
        logger.debug("Arena grown to %d slots", len(self._slot_value))
        return len(self._slot_value) - 1

    def _release(self, slot: int) -> int:
        value = self._slot_value[slot]
        self._slot_value[slot] = 0
        self._slot_next[slot] = None
        self._free.append(slot)
        return value

    def _slots(self) -> Iterator[int]:
        slot = self._head
        while slot is not None:
            yield slot
            slot = self._slot_next[slot]

    def _slot_at(self, position: int) -> int:
        """Return the slot at 1-based ``position``; caller guarantees it exists."""
        slot = self._head
        for _ in range(position - 1):
            assert slot is not None
            slot = self._slot_next[slot]
        assert slot is not None
        return slot

    def _values(self) -> Iterator[int]:
        for slot in self._slots():
            yield self._slot_value[slot]

    def _release_all(self) -> int:
        released = self.allocated
        self._head = None
        self._slot_value.clear()
        self._slot_next.clear()
        self._free.clear()
        logger.debug("Released %d arena slots", released)
        return released

    # ---- mutation ----

    def add_to_back(self, value: int) -> None:
        self._ensure_alive("add_to_back")
        new = self._alloc(as_element(value))
        if self._head is None:
            self._head = new
            return
        tail = self._head
        while (nxt := self._slot_next[tail]) is not None:
            tail = nxt
        self._slot_next[tail] = new

    def add_to_front(self, value: int) -> None:
        self._ensure_alive("add_to_front")
        new = self._alloc(as_element(value))
        self._slot_next[new] = self._head
        self._head = new

    def add_at_index(self, value: int, index: int) -> None:
        self._ensure_alive("add_at_index")
        element = as_element(value)
        length = self.length()
        position = self._insert_position(index, length)
        if position is None:
            logger.debug(
                "add_at_index %d: outside [1, %d]; noop", index, length + 1
            )
            return
        if position == 1:
            self.add_to_front(element)
            return
        prev = self._slot_at(position - 1)
        new = self._alloc(element)
        self._slot_next[new] = self._slot_next[prev]
        self._slot_next[prev] = new

    def remove_from_back(self) -> int:
        self._ensure_alive("remove_from_back")
        if self._head is None:
            raise EmptyListError("remove_from_back")
        prev: int | None = None
        last = self._head
        while (nxt := self._slot_next[last]) is not None:
            prev, last = last, nxt
        if prev is None:
            self._head = None
        else:
            self._slot_next[prev] = None
        return self._release(last)

    def remove_from_front(self) -> int:
        self._ensure_alive("remove_from_front")
        if self._head is None:
            raise EmptyListError("remove_from_front")
        first = self._head
        self._head = self._slot_next[first]
        return self._release(first)

    def remove_at_index(self, index: int) -> int:
        self._ensure_alive("remove_at_index")
        position = self._check_access_index(
            "remove_at_index", index, self.length()
        )
        if position == 1:
            return self.remove_from_front()
        prev = self._slot_at(position - 1)
        victim = self._slot_next[prev]
        assert victim is not None
        self._slot_next[prev] = self._slot_next[victim]
        return self._release(victim)

    # ---- query ----

    def length(self) -> int:
        self._ensure_alive("length")
        return sum(1 for _ in self._slots())

    def get_at(self, index: int) -> int:
        self._ensure_alive("get_at")
        position = self._check_access_index("get_at", index, self.length())
        return self._slot_value[self._slot_at(position)]
