"""Build a LinkedList from explicit choices or the environment configuration."""

from __future__ import annotations

import logging

from chainlist import config
from chainlist.adapters.linked_list import ArenaList, NodeChainList
from chainlist.config import Backend
from chainlist.interfaces.linked_list import AllocationError, InsertPolicy, LinkedList

logger = logging.getLogger(__name__)


def create(
    backend: Backend | str | None = None,
    *,
    insert_policy: InsertPolicy | str | None = None,
    capacity: int | None = None,
) -> LinkedList:
    """Create a new, empty list.

    Arguments left as ``None`` fall back to ``CHAINLIST_BACKEND``,
    ``CHAINLIST_INSERT_POLICY`` and ``CHAINLIST_ARENA_CAPACITY``.

    Args:
        backend: Storage strategy, ``"chain"`` or ``"arena"``.
        insert_policy: ``"lenient"`` or ``"strict"`` handling of out-of-range
            ``add_at_index`` calls.
        capacity: Live-slot bound for the arena backend. Ignored by the chain
            backend.

    Returns:
        LinkedList: The new list.

    Raises:
        AllocationError: If the list object itself cannot be allocated.
        InvalidConfigError: If an environment fallback holds a bad value.
        ValueError: If ``backend`` or ``insert_policy`` is not recognised.
    """
    chosen_backend = Backend(backend) if backend is not None else config.get_backend()
    policy = (
        InsertPolicy(insert_policy)
        if insert_policy is not None
        else config.get_insert_policy()
    )

    if chosen_backend is Backend.ARENA and capacity is None:
        capacity = config.get_arena_capacity()

    logger.debug(
        "Creating %s list (insert policy: %s)", chosen_backend.value, policy.value
    )
    try:
        if chosen_backend is Backend.ARENA:
            return ArenaList(insert_policy=policy, capacity=capacity)
        return NodeChainList(insert_policy=policy)
    except MemoryError as e:
        raise AllocationError("out of memory") from e
