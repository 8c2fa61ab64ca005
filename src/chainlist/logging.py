"""Logging helpers used by the chainlist CLI.

Console output goes through Rich; an optional in-memory "flight recorder"
keeps recent DEBUG records and dumps them to a file when something goes
wrong. Records from loggers outside the project get a short bracketed prefix
on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version as dist_version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "chainlist"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def logger_prefix(name: str) -> str:
    """Return the console prefix for records from logger ``name``.

    Args:
        name: Dotted logger name, e.g. ``"click_extra.colorize"``.

    Returns:
        str: ``""`` for chainlist loggers, otherwise the top-level package in
        brackets, e.g. ``"[click_extra]"``.
    """
    top = name.partition(".")[0]
    return "" if top == PROJECT_PREFIX else f"[{top}]"


class ThirdPartyPrefixFilter(logging.Filter):
    """Attach a ``prefix`` attribute naming the package a record came from.

    The console format of a non-debug run starts with ``%(prefix)s``, so every
    record passing through that handler needs the attribute set. Records are
    never dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Set ``record.prefix`` and let the record through.

        Args:
            record: The LogRecord being processed.

        Returns:
            bool: Always True.
        """
        record.prefix = logger_prefix(record.name)
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    In debug mode the handler accepts DEBUG records and shows timestamps,
    logger names and source paths. Otherwise records carry only their
    third-party prefix and message.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug_mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Enable color output when True, matching click-extra's
            ``--color / --no-color``.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Up to ``capacity`` records are buffered and written to ``path`` when a
    record at ``flush_level`` or above arrives, or on close when
    ``flush_on_close`` is set. The file is truncated on every run.

    Args:
        path: Destination file for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level that triggers a flush.
        flush_on_close: Flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def startup_diagnostics(  # pylint: disable=too-many-arguments
    *,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: Mapping[str, int],
    list_settings: Mapping[str, object],
) -> Iterator[tuple[str, object]]:
    """Yield ``(label, value)`` pairs describing the running process.

    Args:
        handlers: Active logging handlers attached to the root logger.
        log_path: Path to the flight-recorder output file, or None.
        flight_recorder: Whether the flight recorder is enabled.
        flight_capacity: Capacity of the flight recorder buffer, or None.
        force_flush_fr: Whether the flight recorder flushes on close.
        logger_levels: Logger names mapped to their configured numeric levels.
        list_settings: List construction choices, e.g. backend and policy.

    Yields:
        tuple[str, object]: A label and the value to log after it.
    """
    yield "Python", sys.version.split()[0]
    yield "Platform", f"{platform.system()} {platform.release()}"
    yield "PID", os.getpid()
    yield "CWD", Path.cwd()
    yield "Click", dist_version("click")
    yield "Rich", dist_version("rich")
    yield "List", ", ".join(f"{k}={v}" for k, v in list_settings.items())
    yield "Handlers", [type(h).__name__ for h in handlers]
    if flight_recorder:
        yield "Flight recorder", (
            f"path={log_path or '<none>'}, capacity={flight_capacity}, "
            f"flush_on_close={force_flush_fr}"
        )
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    yield "Per-logger overrides", overrides or "<none>"


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    flight_recorder: bool,
    **diagnostics,
) -> None:
    """Log a one-line startup summary plus DEBUG diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        flight_recorder: Whether the in-memory flight recorder is enabled.
        **diagnostics: Forwarded to ``startup_diagnostics``.
    """
    logger.info(
        "CHAINLIST %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )
    for label, value in startup_diagnostics(
        flight_recorder=flight_recorder, **diagnostics
    ):
        logger.debug("%s: %s", label, value)
