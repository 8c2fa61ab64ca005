"""Node-chain implementation of the LinkedList interface.

Each node exclusively owns its successor and the list owns the head, so the
whole chain is reachable from exactly one reference. There is no tail
pointer: appends and removals at the back walk the chain.
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


class _Node:
    __slots__ = ("value", "next", "__weakref__")

    def __init__(self, value: int) -> None:
        self.value: int = value
        self.next: _Node | None = None


def _new_node(value: int) -> _Node:
    try:
        return _Node(value)
    except MemoryError as e:
        raise AllocationError("out of memory") from e


class NodeChainList(LinkedList):
    """LinkedList backed by a chain of individually allocated nodes."""

    def __init__(self, insert_policy: InsertPolicy = InsertPolicy.LENIENT) -> None:
        super().__init__(insert_policy)
        self._head: _Node | None = None

    # ---- traversal ----

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _values(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.value

    def _node_at(self, position: int) -> _Node:
        """Return the node at 1-based ``position``; caller guarantees it exists."""
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _release_all(self) -> int:
        released = 0
        node = self._head
        self._head = None
        while node is not None:
            nxt = node.next
            node.next = None
            node = nxt
            released += 1
        logger.debug("Released %d nodes", released)
        return released

    # ---- mutation ----

    def add_to_back(self, value: int) -> None:
        self._ensure_alive("add_to_back")
        new = _new_node(as_element(value))
        if self._head is None:
            self._head = new
            return
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        tail.next = new

    def add_to_front(self, value: int) -> None:
        self._ensure_alive("add_to_front")
        new = _new_node(as_element(value))
        new.next = self._head
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
        prev = self._node_at(position - 1)
        new = _new_node(element)
        new.next = prev.next
        prev.next = new

    def remove_from_back(self) -> int:
        self._ensure_alive("remove_from_back")
        if self._head is None:
            raise EmptyListError("remove_from_back")
        if self._head.next is None:
            value = self._head.value
            self._head = None
            return value
        prev = self._head
        while prev.next is not None and prev.next.next is not None:
            prev = prev.next
        last = prev.next
        assert last is not None
        prev.next = None
        return last.value

    def remove_from_front(self) -> int:
        self._ensure_alive("remove_from_front")
        if self._head is None:
            raise EmptyListError("remove_from_front")
        first = self._head
        self._head = first.next
        first.next = None
        return first.value

    def remove_at_index(self, index: int) -> int:
        self._ensure_alive("remove_at_index")
        position = self._check_access_index(
            "remove_at_index", index, self.length()
        )
        if position == 1:
            return self.remove_from_front()
        prev = self._node_at(position - 1)
        victim = prev.next
        assert victim is not None
        prev.next = victim.next
        victim.next = None
        return victim.value

    # ---- query ----

    def length(self) -> int:
        self._ensure_alive("length")
        return sum(1 for _ in self._nodes())

    def get_at(self, index: int) -> int:
        self._ensure_alive("get_at")
        position = self._check_access_index("get_at", index, self.length())
        return self._node_at(position).value
