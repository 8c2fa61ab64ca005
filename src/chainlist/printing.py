"""Console rendering of lists.

``print_list`` distinguishes three states: no list at all (``None`` or a
destroyed handle), an empty list, and a list with elements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

if TYPE_CHECKING:
    from chainlist.interfaces.linked_list import LinkedList

ABSENT_TEXT = "LIST IS NULL"  # pragma: no mutate
EMPTY_TEXT = "LIST IS EMPTY"  # pragma: no mutate


def render(lst: LinkedList | None) -> str:
    """Return the line ``print_list`` would write for ``lst``."""
    if lst is None or lst.destroyed:
        return ABSENT_TEXT
    if lst.length() == 0:
        return EMPTY_TEXT
    return lst.to_string()


def print_list(lst: LinkedList | None, file: TextIO | None = None) -> None:
    """Write ``lst`` to stdout (or ``file``) followed by a newline.

    Args:
        lst: The list to show, or ``None`` when there is no list.
        file: Destination stream; defaults to stdout.
    """
    click.echo(render(lst), file=file)
