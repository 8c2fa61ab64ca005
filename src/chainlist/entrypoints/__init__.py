"""Entrypoints (inbound adapters) for chainlist.

Expose the list to the outside world through the ``chainlist`` command.
Parse inputs, build lists through `chainlist.bootstrap`, and present results.

Dependency rule: may import `chainlist.bootstrap` and `chainlist.interfaces`;
avoid importing `chainlist.adapters` directly.
"""
