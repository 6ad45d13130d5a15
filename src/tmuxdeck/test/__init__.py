"""Helper methods for tmuxdeck and downstream tmuxdeck libraries."""

from __future__ import annotations

import contextlib
import logging
import typing as t

from tmuxdeck import exc
from tmuxdeck.test.capture import wait_for_capture
from tmuxdeck.test.constants import (
    CAPTURE_INTERVAL_SECONDS,
    CAPTURE_TIMEOUT_SECONDS,
    TEST_SESSION_PREFIX,
    TEST_SOCKET_PREFIX,
)
from tmuxdeck.test.random import get_test_session_name, namer

if t.TYPE_CHECKING:
    from collections.abc import Generator

    from tmuxdeck.server import Server
    from tmuxdeck.session import Session

logger = logging.getLogger(__name__)

__all__ = (
    "CAPTURE_INTERVAL_SECONDS",
    "CAPTURE_TIMEOUT_SECONDS",
    "TEST_SESSION_PREFIX",
    "TEST_SOCKET_PREFIX",
    "get_test_session_name",
    "namer",
    "temp_session",
    "wait_for_capture",
)


@contextlib.contextmanager
def temp_session(
    server: Server,
    session_name: str | None = None,
) -> Generator[Session, t.Any, t.Any]:
    """
    Return a context manager with a temporary session.

    If no ``session_name`` is entered, :func:`get_test_session_name` will make
    an unused session name. The session is killed on exit unless it is
    already gone.

    Parameters
    ----------
    server : :class:`tmuxdeck.Server`
    session_name : str, optional

    Yields
    ------
    :class:`tmuxdeck.Session`
        Temporary session
    """
    if session_name is None:
        session_name = get_test_session_name(server)

    session = server.new_session(session_name).session
    try:
        yield session
    finally:
        with contextlib.suppress(exc.CommandFailed):
            server.kill_session(session.name)
