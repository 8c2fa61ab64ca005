"""Interface for a singly-linked list of integers with 1-based positions."""

from __future__ import annotations

import abc
import io
import operator
from collections.abc import Iterator
from enum import Enum
from types import TracebackType
from typing import Self

from .digits import decimal_text
from .errors import (
    AbsentContainerError,
    EmptyListError,
    IndexOutOfRangeError,
    InvalidElementError,
    InvalidIndexError,
    ValueNotFoundError,
)

TERMINATOR = "NULL"  # pragma: no mutate
ARROW = "->"  # pragma: no mutate


class InsertPolicy(str, Enum):
    """What ``add_at_index`` does with an index outside ``[1, length+1]``.

    ``LENIENT`` leaves the list unchanged and returns silently.
    ``STRICT`` leaves the list unchanged and raises ``IndexOutOfRangeError``.
    """

    LENIENT = "lenient"
    STRICT = "strict"


def as_element(value: object) -> int:
    """Coerce an integer-like value to a plain ``int`` element.

    Args:
        value: Any object implementing ``__index__``.

    Returns:
        int: The element value.

    Raises:
        InvalidElementError: If ``value`` is not integer-like.
    """
    try:
        return int(operator.index(value))  # type: ignore[arg-type]
    except TypeError as e:
        raise InvalidElementError(value) from e


class LinkedList(abc.ABC):
    """Interface for a singly-linked list of integer elements.

    The list is reachable only through its head. Positions are 1-based:
    ``[1, length]`` for reads and removals, ``[1, length + 1]`` for inserts.
    Failures are reported with exceptions from
    ``chainlist.interfaces.linked_list.errors``; no call ever leaves the list
    partially modified.

    A list owns every node reachable from its head. ``destroy()`` releases
    them and consumes the handle, after which every operation raises
    ``AbsentContainerError``.
    """

    def __init__(self, insert_policy: InsertPolicy = InsertPolicy.LENIENT) -> None:
        self._insert_policy = InsertPolicy(insert_policy)
        self._destroyed = False

    # ---- lifecycle ----

    @property
    def insert_policy(self) -> InsertPolicy:
        """How out-of-range ``add_at_index`` calls are handled."""
        return self._insert_policy

    @property
    def destroyed(self) -> bool:
        """True once ``destroy()`` has released the list."""
        return self._destroyed

    def destroy(self) -> int:
        """Release every node and consume the handle.

        Returns:
            int: The number of nodes released.

        Raises:
            AbsentContainerError: If the list was already destroyed.
        """
        self._ensure_alive("destroy")
        released = self._release_all()
        self._destroyed = True
        return released

    def __enter__(self) -> Self:
        self._ensure_alive("enter")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._destroyed:
            self.destroy()

    # ---- mutation ----

    @abc.abstractmethod
    def add_to_back(self, value: int) -> None:
        """Append ``value`` after the current last element.

        Raises:
            AllocationError: If a node cannot be obtained.
            InvalidElementError: If ``value`` is not integer-like.
        """

    @abc.abstractmethod
    def add_to_front(self, value: int) -> None:
        """Prepend ``value`` before the current first element.

        Raises:
            AllocationError: If a node cannot be obtained.
            InvalidElementError: If ``value`` is not integer-like.
        """

    @abc.abstractmethod
    def add_at_index(self, value: int, index: int) -> None:
        """Insert ``value`` so that it ends up at 1-based position ``index``.

        ``index == 1`` prepends and ``index == length + 1`` appends. Any other
        index outside ``[1, length + 1]`` is handled by the insert policy:
        ignored under ``LENIENT``, rejected under ``STRICT``.

        Raises:
            IndexOutOfRangeError: Under ``STRICT`` for an out-of-range index.
            InvalidIndexError: If ``index`` is not integer-like.
            AllocationError: If a node cannot be obtained.
            InvalidElementError: If ``value`` is not integer-like.
        """

    @abc.abstractmethod
    def remove_from_back(self) -> int:
        """Remove the last element and return its value.

        Raises:
            EmptyListError: If the list holds no elements.
        """

    @abc.abstractmethod
    def remove_from_front(self) -> int:
        """Remove the first element and return its value.

        Raises:
            EmptyListError: If the list holds no elements.
        """

    @abc.abstractmethod
    def remove_at_index(self, index: int) -> int:
        """Remove the element at 1-based position ``index`` and return its value.

        Raises:
            EmptyListError: If the list holds no elements.
            IndexOutOfRangeError: If ``index`` is outside ``[1, length]``.
            InvalidIndexError: If ``index`` is not integer-like.
        """

    # ---- query ----

    @abc.abstractmethod
    def length(self) -> int:
        """Return the number of elements in the list."""

    @abc.abstractmethod
    def get_at(self, index: int) -> int:
        """Return the value at 1-based position ``index``.

        Raises:
            EmptyListError: If the list holds no elements.
            IndexOutOfRangeError: If ``index`` is outside ``[1, length]``.
            InvalidIndexError: If ``index`` is not integer-like.
        """

    @abc.abstractmethod
    def _values(self) -> Iterator[int]:
        """Yield element values from head to tail."""

    @abc.abstractmethod
    def _release_all(self) -> int:
        """Release every node; return how many were released."""

    def contains(self, value: int) -> bool:
        """Return True if some element equals ``value``."""
        self._ensure_alive("contains")
        try:
            target = as_element(value)
        except InvalidElementError:
            return False
        return any(v == target for v in self._values())

    def index_of(self, value: int) -> int:
        """Return the 1-based position of the first element equal to ``value``.

        Raises:
            ValueNotFoundError: If no element equals ``value``.
            InvalidElementError: If ``value`` is not integer-like.
        """
        self._ensure_alive("index_of")
        target = as_element(value)
        for position, v in enumerate(self._values(), start=1):
            if v == target:
                return position
        raise ValueNotFoundError(target)

    def to_string(self) -> str:
        """Render the list as ``v1->v2->...->vk->NULL`` (``NULL`` when empty).

        Elements are written in full whatever their number of digits.
        """
        self._ensure_alive("to_string")
        buf = io.StringIO()
        for v in self._values():
            buf.write(decimal_text(v))
            buf.write(ARROW)
        buf.write(TERMINATOR)
        return buf.getvalue()

    def to_list(self) -> list[int]:
        """Return the element values, head first, as a Python list."""
        self._ensure_alive("to_list")
        return list(self._values())

    # ---- protocol sugar ----

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[int]:
        self._ensure_alive("iterate")
        return self._values()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._destroyed:
            return f"{type(self).__name__}(<destroyed>)"
        values = ", ".join(decimal_text(v) for v in self._values())
        return f"{type(self).__name__}([{values}])"

    # ---- shared checks ----

    def _ensure_alive(self, operation: str) -> None:
        if self._destroyed:
            raise AbsentContainerError(operation)

    @staticmethod
    def _as_position(operation: str, index: object) -> int:
        try:
            return int(operator.index(index))  # type: ignore[arg-type]
        except TypeError as e:
            raise InvalidIndexError(operation, index) from e

    def _check_access_index(self, operation: str, index: int, length: int) -> int:
        """Validate a read/remove index against ``[1, length]``.

        Returns:
            int: ``index`` as a plain ``int`` position.

        Raises:
            InvalidIndexError: If ``index`` is not integer-like.
            EmptyListError: If ``length`` is zero.
            IndexOutOfRangeError: If ``index`` is outside ``[1, length]``.
            InvalidIndexError: If ``index`` is not integer-like.
        """
        position = self._as_position(operation, index)
        if length == 0:
            raise EmptyListError(operation)
        if not 1 <= position <= length:
            raise IndexOutOfRangeError(operation, position, 1, length)
        return position

    def _insert_position(self, index: int, length: int) -> int | None:
        """Apply the insert policy to ``index``.

        Returns the position to insert at, or None when a ``LENIENT`` list
        ignores an out-of-range index.
        """
        position = self._as_position("add_at_index", index)
        if 1 <= position <= length + 1:
            return position
        if self._insert_policy is InsertPolicy.STRICT:
            raise IndexOutOfRangeError("add_at_index", position, 1, length + 1)
        return None
