"""Configuration utilities for chainlist.

This module centralizes the environment lookups that select the default list
backend, the out-of-range insert policy, and the arena capacity bound.
"""

import os
from enum import Enum

from chainlist.interfaces.linked_list import InsertPolicy

BACKEND_ENV = "CHAINLIST_BACKEND"  # pragma: no mutate
INSERT_POLICY_ENV = "CHAINLIST_INSERT_POLICY"  # pragma: no mutate
ARENA_CAPACITY_ENV = "CHAINLIST_ARENA_CAPACITY"  # pragma: no mutate


class InvalidConfigError(Exception):
    """Raised when a chainlist environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}; expected {expected}.")
        self.name = name
        self.value = value


class Backend(str, Enum):
    """Storage strategy behind a list."""

    CHAIN = "chain"
    ARENA = "arena"


def _choice[E: Enum](enum_type: type[E], name: str, default: E) -> E:
    if not (raw := os.environ.get(name)):
        return default
    try:
        return enum_type(raw.strip().lower())
    except ValueError as e:
        expected = " or ".join(repr(member.value) for member in enum_type)
        raise InvalidConfigError(name, raw, expected) from e


def get_backend() -> Backend:
    """Get the default backend from the environment.

    Returns:
        The value of ``CHAINLIST_BACKEND``, or ``Backend.CHAIN`` when unset.

    Raises:
        InvalidConfigError: If the variable names an unknown backend.
    """
    return _choice(Backend, BACKEND_ENV, Backend.CHAIN)


def get_insert_policy() -> InsertPolicy:
    """Get the default insert policy from the environment.

    Returns:
        The value of ``CHAINLIST_INSERT_POLICY``, or ``InsertPolicy.LENIENT``.

    Raises:
        InvalidConfigError: If the variable names an unknown policy.
    """
    return _choice(InsertPolicy, INSERT_POLICY_ENV, InsertPolicy.LENIENT)


def get_arena_capacity() -> int | None:
    """Get the arena capacity bound from the environment.

    Returns:
        The positive integer in ``CHAINLIST_ARENA_CAPACITY``, or ``None``
        (unbounded) when the variable is unset.

    Raises:
        InvalidConfigError: If the value is not a positive integer.
    """
    if not (raw := os.environ.get(ARENA_CAPACITY_ENV)):
        return None
    try:
        capacity = int(raw)
    except ValueError as e:
        raise InvalidConfigError(ARENA_CAPACITY_ENV, raw, "a positive integer") from e
    if capacity < 1:
        raise InvalidConfigError(ARENA_CAPACITY_ENV, raw, "a positive integer")
    return capacity
