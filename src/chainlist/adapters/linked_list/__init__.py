"""Contains concrete implementations of the LinkedList interface."""

from .arena import ArenaList
from .node_chain import NodeChainList

__all__ = [
    "ArenaList",
    "NodeChainList",
]
