"""Global pytest configuration for chainlist.

Tests are marked after the top-level directory they live in
(`unit`, `contract`, `e2e`) so a suite can be selected with ``-m``.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
SUITES = ("unit", "contract", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the suite mark matching each item's top-level test directory."""
    for item in items:
        try:
            suite = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if suite in SUITES and not any(m.name == suite for m in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, suite))
