"""Fixtures shared by the LinkedList contract tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import pytest

from chainlist.adapters.linked_list import ArenaList, NodeChainList
from chainlist.interfaces.linked_list import InsertPolicy

if TYPE_CHECKING:
    from chainlist.interfaces.linked_list import LinkedList

# Deal with pytest fixtures
# pylint: disable=redefined-outer-name

BACKENDS = ["chain", "arena"]


def _build(kind: str, policy: InsertPolicy) -> LinkedList:
    match kind:
        case "chain":
            return NodeChainList(insert_policy=policy)
        case "arena":
            return ArenaList(insert_policy=policy)
        case _:
            raise ValueError(f"unknown list backend: {kind}")


@pytest.fixture(params=BACKENDS)
def backend(request: pytest.FixtureRequest) -> str:
    """Name of the backend under test."""
    return request.param


@pytest.fixture
def make_list(backend: str) -> Callable[..., LinkedList]:
    """Return a factory building lists of the backend under test.

    ``make_list(3, 1, 4)`` returns a list built with sequential
    ``add_to_back`` calls; ``policy=`` selects the insert policy.
    """

    def factory(*values: int, policy: InsertPolicy = InsertPolicy.LENIENT):
        lst = _build(backend, policy)
        for value in values:
            lst.add_to_back(value)
        return lst

    return factory


@pytest.fixture
def empty(make_list: Callable[..., LinkedList]) -> Iterable[LinkedList]:
    """A fresh, empty list."""
    yield make_list()


@pytest.fixture
def sample(make_list: Callable[..., LinkedList]) -> Iterable[LinkedList]:
    """The list [3, 1, 4, 1, 5]."""
    yield make_list(3, 1, 4, 1, 5)
