"""Parse and apply the operation tokens accepted by ``chainlist run``.

Token grammar::

    back:V   front:V   at:V@I
    pop-back   pop-front   remove:I
    get:I   index:V   contains:V   length   print

``V`` is an integer element, ``I`` a 1-based index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

from chainlist.interfaces.linked_list import decimal_text
from chainlist.printing import render

if TYPE_CHECKING:
    from chainlist.interfaces.linked_list import LinkedList

TAKES_VALUE = frozenset({"back", "front", "index", "contains"})
TAKES_INDEX = frozenset({"remove", "get"})
BARE = frozenset({"pop-back", "pop-front", "length", "print"})


@dataclass(frozen=True, slots=True)
class Op:
    """One parsed operation token."""

    name: str
    value: int | None = None
    index: int | None = None
    token: str = ""


def _int(token: str, text: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        raise click.BadParameter(f"{token!r}: {text!r} is not an integer") from e


def parse_op(token: str) -> Op:
    """Parse a single operation token.

    Raises:
        click.BadParameter: If the token is unknown or its operand is malformed.
    """
    name, sep, arg = token.partition(":")
    if name in BARE and not sep:
        return Op(name, token=token)
    if not sep or not arg:
        raise click.BadParameter(f"unknown or incomplete operation {token!r}")
    if name in TAKES_VALUE:
        return Op(name, value=_int(token, arg), token=token)
    if name in TAKES_INDEX:
        return Op(name, index=_int(token, arg), token=token)
    if name == "at":
        value, at, index = arg.partition("@")
        if not at:
            raise click.BadParameter(f"{token!r}: expected at:VALUE@INDEX")
        return Op(
            name, value=_int(token, value), index=_int(token, index), token=token
        )
    raise click.BadParameter(f"unknown operation {token!r}")


def parse_ops(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> list[Op]:
    """Click callback parsing every ``run`` argument into an ``Op``."""
    return [parse_op(token) for token in value]


def apply_op(lst: LinkedList, op: Op) -> str | None:
    """Apply ``op`` to ``lst`` and return the line to print, if any.

    List errors propagate to the caller unchanged.
    """
    match op.name:
        case "back":
            lst.add_to_back(op.value)  # type: ignore[arg-type]
        case "front":
            lst.add_to_front(op.value)  # type: ignore[arg-type]
        case "at":
            lst.add_at_index(op.value, op.index)  # type: ignore[arg-type]
        case "pop-back":
            return decimal_text(lst.remove_from_back())
        case "pop-front":
            return decimal_text(lst.remove_from_front())
        case "remove":
            return decimal_text(lst.remove_at_index(op.index))  # type: ignore[arg-type]
        case "get":
            return decimal_text(lst.get_at(op.index))  # type: ignore[arg-type]
        case "index":
            return str(lst.index_of(op.value))  # type: ignore[arg-type]
        case "contains":
            return "true" if lst.contains(op.value) else "false"  # type: ignore[arg-type]
        case "length":
            return str(lst.length())
        case "print":
            return render(lst)
    return None
