"""Adapters (storage) for chainlist.

Provide concrete implementations of the ``LinkedList`` port, one per
ownership strategy.

Dependency rule: may import `chainlist.interfaces`; interfaces must not import
this package.
"""
