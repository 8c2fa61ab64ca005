"""Bootstrap (composition root) for chainlist.

Chooses a concrete list backend from explicit arguments or the environment
configuration and hands back a ready-to-use ``LinkedList``.

Import rules:
- Entry points import *this* package rather than individual adapters.
- Inner layers must not import `chainlist.bootstrap`.
"""

from .bootstrap import create

__all__ = ["create"]
