"""chainlist

A singly-linked list container of integer elements with 1-based positional
access, explicit error signalling, and a ``v1->v2->...->NULL`` text form.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
