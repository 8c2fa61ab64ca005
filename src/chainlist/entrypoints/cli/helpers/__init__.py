"""CLI helpers for chainlist.

Option callbacks (logger levels, operation tokens) and stderr message
emitters with emoji→ASCII fallbacks.
"""

from .messages import error, warn

__all__ = ["error", "warn"]
