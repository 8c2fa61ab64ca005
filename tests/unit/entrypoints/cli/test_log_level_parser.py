"""Unit tests for the ``-L NAME=LEVEL`` option callback."""

import logging
import types

import click
import pytest

from chainlist.entrypoints.cli.helpers.log_level_parser import parse_log_level

CTX = types.SimpleNamespace()  # the callback ignores its context


def test_empty_uses_defaults():
    """No items leaves only the library defaults."""
    assert parse_log_level(CTX, None, ()) == {"click_extra": logging.WARNING}


def test_later_items_win():
    """Repeated names keep the last level given."""
    out = parse_log_level(
        CTX, None, ("chainlist=INFO", "click_extra=ERROR", "chainlist=DEBUG")
    )
    assert out == {"click_extra": logging.ERROR, "chainlist": logging.DEBUG}


@pytest.mark.parametrize(
    "value",
    [
        "chainlist.adapters=debug,  urllib3=WARNING click_extra=Error",
        ("chainlist.adapters=debug,urllib3=WARNING", "click_extra=Error"),
    ],
    ids=["env-string", "repeated-flags"],
)
def test_separators_and_case(value):
    """Commas, spaces and level-name case are all accepted."""
    out = parse_log_level(CTX, None, value)
    assert out["chainlist.adapters"] == logging.DEBUG
    assert out["urllib3"] == logging.WARNING
    assert out["click_extra"] == logging.ERROR


@pytest.mark.parametrize("item", ["chainlist", "=INFO", "chainlist=LOUD"])
def test_malformed_items_raise(item):
    """Missing names, missing '=' and unknown levels are rejected."""
    with pytest.raises(click.BadParameter):
        parse_log_level(CTX, None, (item,))
