"""chainlist CLI entry point.

Defines the top-level ``chainlist`` command (via Click-Extra): logging setup
shared by every subcommand plus the backend and insert-policy choices that
``run`` and ``demo`` build their list with.

Examples
    $ chainlist demo
    $ chainlist run back:3 back:1 front:9 at:7@2 print pop-back
    $ chainlist --backend arena --insert-policy strict run at:1@5
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from chainlist import __version__
from chainlist.config import Backend
from chainlist.interfaces.linked_list import InsertPolicy
from chainlist.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers.log_level_parser import parse_log_level
from .list_cmds import ListSettings, demo, run

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """chainlist command-line interface.

    Drive a singly-linked list of integers from the shell: build it with
    front/back/indexed inserts, remove and look up elements by 1-based
    position, and print it as v1->v2->...->NULL.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight-recorder log file.",
    default=Path(user_log_dir("chainlist", appauthor=False, ensure_exists=True))
    / "latest.log",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity and write them to "
        "--log-path when a WARNING/ERROR occurs, or on exit with --force-flush."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight-recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L chainlist.adapters=DEBUG) or a comma/space list."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--backend",
    type=click.Choice([b.value for b in Backend], case_sensitive=False),
    default=None,
    help="List storage: node 'chain' or index 'arena'. [default: chain]",
    show_envvar=True,
)
@click.option(
    "--insert-policy",
    type=click.Choice([p.value for p in InsertPolicy], case_sensitive=False),
    default=None,
    help=(
        "Out-of-range at:V@I inserts are ignored ('lenient') or rejected "
        "('strict'). [default: lenient]"
    ),
    show_envvar=True,
)
@click.option(
    "--arena-capacity",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum live nodes for the arena backend (unbounded when omitted).",
    show_envvar=True,
)
@clickx.pass_context
def chainlist(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    backend: str | None,
    insert_policy: str | None,
    arena_capacity: int | None,
) -> None:
    """chainlist command-line interface."""

    # 0) effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger; handlers do the filtering
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    ctx.obj = ListSettings(
        backend=backend, insert_policy=insert_policy, capacity=arena_capacity
    )

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        list_settings={
            "backend": backend or "<env/default>",
            "insert_policy": insert_policy or "<env/default>",
            "arena_capacity": arena_capacity or "<env/default>",
        },
    )

    ctx.call_on_close(logging.shutdown)


chainlist.add_command(run)
chainlist.add_command(demo)
