"""Conftest.py (root-level).

We keep this in root pytest fixtures in pytest's doctest plugin to be available, as well
as avoiding conftest.py from being included in the wheel.

The ``server`` and ``session`` fixtures come from :mod:`tmuxdeck.pytest_plugin`,
registered through the ``pytest11`` entry point.
"""

from __future__ import annotations

import typing as t

import pytest
from _pytest.doctest import DoctestItem

from tmuxdeck.server import Server


@pytest.fixture(autouse=True)
def add_doctest_fixtures(
    request: pytest.FixtureRequest,
    doctest_namespace: dict[str, t.Any],
) -> None:
    """Configure doctest fixtures for pytest-doctest.

    Docstring examples calling ``server.`` get a live :func:`server`, which
    skips them when tmux is not installed.
    """
    doctest_namespace["Server"] = Server
    item = request._pyfuncitem
    if isinstance(item, DoctestItem) and item.dtest is not None:
        if any("server." in example.source for example in item.dtest.examples):
            doctest_namespace["server"] = request.getfixturevalue("server")
