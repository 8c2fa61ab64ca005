"""``chainlist run`` and ``chainlist demo``.

Both commands build a fresh list through ``chainlist.bootstrap.create`` using
the backend and insert policy chosen on the top-level command, and destroy
it before returning.

Failure modes
- A list error (empty list, bad index, value not found, arena full) is
  reported on stderr and the command exits with status 1 after printing the
  list as it stood.
- A bad ``CHAINLIST_*`` environment value → ``ClickException``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import click

from chainlist.bootstrap import create
from chainlist.config import InvalidConfigError
from chainlist.interfaces.linked_list import LinkedList, LinkedListError
from chainlist.printing import print_list

from .helpers import error, warn
from .helpers.ops import Op, apply_op, parse_ops

logger = logging.getLogger(__name__)

DEMO_VALUES = (3, 1, 4, 1, 5)


@dataclass(frozen=True, slots=True)
class ListSettings:
    """List construction choices carried from the top-level command."""

    backend: str | None = None
    insert_policy: str | None = None
    capacity: int | None = None


def _new_list(settings: ListSettings | None) -> LinkedList:
    settings = settings or ListSettings()
    try:
        return create(
            settings.backend,
            insert_policy=settings.insert_policy,
            capacity=settings.capacity,
        )
    except InvalidConfigError as e:
        raise click.ClickException(str(e)) from e


def _apply(lst: LinkedList, op: Op) -> None:
    before = lst.length() if op.name == "at" else None
    if (line := apply_op(lst, op)) is not None:
        click.echo(line)
    if before is not None and lst.length() == before:
        warn(f"{op.token} ignored: index outside [1, {before + 1}]")


@click.command()
@click.argument("ops", nargs=-1, required=True, callback=parse_ops)
@click.pass_context
def run(ctx: click.Context, ops: list[Op]) -> None:
    """Apply OPS to a new list, echoing query results, then print the list.

    \b
    OPS: back:V front:V at:V@I pop-back pop-front remove:I
         get:I index:V contains:V length print
    """
    with _new_list(ctx.obj) as lst:
        for op in ops:
            logger.debug("Applying %s", op.token)
            try:
                _apply(lst, op)
            except LinkedListError as e:
                logger.warning("%s failed: %s", op.token, e)
                error(f"{op.token}: {e}")
                print_list(lst)
                ctx.exit(1)
        print_list(lst)


@click.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Build [3, 1, 4, 1, 5] and show a few lookups."""
    with _new_list(ctx.obj) as lst:
        try:
            for value in DEMO_VALUES:
                lst.add_to_back(value)
        except LinkedListError as e:
            logger.warning("demo failed: %s", e)
            error(f"demo: {e}")
            print_list(lst)
            ctx.exit(1)
        print_list(lst)
        click.echo(f"length: {lst.length()}")
        click.echo(f"index_of(1): {lst.index_of(1)}")
        click.echo(f"contains(9): {str(lst.contains(9)).lower()}")
