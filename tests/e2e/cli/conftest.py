"""Fixtures for end-to-end tests of the ``chainlist`` command.

Provides a test-only `log-demo` command that emits log records at every
level, a CliRunner, and an isolated filesystem so flight-recorder files stay
inside the test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from chainlist.entrypoints.cli.main import chainlist

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one record per level on a project logger and a third-party logger."""
    logger = logging.getLogger("chainlist.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


@pytest.fixture
def registered_log_demo():
    """Register `log-demo` on the top-level group for one test."""
    chainlist.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        chainlist.commands.pop("log-demo", None)
        for section in getattr(chainlist, "_sections", []):
            getattr(section, "commands", {}).pop("log-demo", None)
        default_section = getattr(chainlist, "_default_section", None)
        if default_section is not None:
            default_section.commands.pop("log-demo", None)


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Invoke ``chainlist`` with the flight recorder off and a clean env."""

    def _invoke(*args: str, env: dict[str, str] | None = None):
        base_env: dict[str, str | None] = {
            "CHAINLIST_BACKEND": None,
            "CHAINLIST_INSERT_POLICY": None,
            "CHAINLIST_ARENA_CAPACITY": None,
        }
        base_env.update(env or {})
        return runner.invoke(
            chainlist, ["--no-flight-recorder", *args], env=base_env
        )

    return _invoke
