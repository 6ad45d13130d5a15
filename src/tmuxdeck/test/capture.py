"""Wait for pane content in tmuxdeck tests."""

from __future__ import annotations

import logging
import time
import typing as t

from tmuxdeck.exc import WaitTimeout
from tmuxdeck.test.constants import (
    CAPTURE_INTERVAL_SECONDS,
    CAPTURE_TIMEOUT_SECONDS,
)

if t.TYPE_CHECKING:
    from collections.abc import Callable

    from tmuxdeck.pane import PaneCapture
    from tmuxdeck.server import Server

logger = logging.getLogger(__name__)


def wait_for_capture(
    server: Server,
    session_name: str,
    window_index: int,
    pane_index: int,
    condition: Callable[[str], bool],
    seconds: float = CAPTURE_TIMEOUT_SECONDS,
    *,
    interval: float = CAPTURE_INTERVAL_SECONDS,
) -> PaneCapture:
    """Capture a pane until ``condition`` holds for its buffer.

    Shells started by tmux draw their output asynchronously, so a capture taken
    right after ``send-keys`` may not show it yet.

    Parameters
    ----------
    server : :class:`tmuxdeck.Server`
    session_name : str
    window_index : int
    pane_index : int
    condition : callable
        Called with each captured buffer.
    seconds : float
        Give up after this long. Defaults to ``8``, configurable via the
        ``TMUXDECK_CAPTURE_TIMEOUT`` environment variable.
    interval : float
        Pause between captures. Defaults to ``0.05``, configurable via
        ``TMUXDECK_CAPTURE_INTERVAL``.

    Returns
    -------
    :class:`tmuxdeck.PaneCapture`
        The first capture satisfying ``condition``.

    Raises
    ------
    :exc:`exc.WaitTimeout`
        ``condition`` never held; carries the last buffer seen.
    """
    deadline = time.monotonic() + seconds
    while True:
        capture = server.capture_pane(session_name, window_index, pane_index).capture
        if condition(capture.buffer):
            return capture
        if time.monotonic() >= deadline:
            logger.debug("%s never matched: %r", capture.target, capture.buffer)
            raise WaitTimeout(capture.target, seconds, capture.buffer)
        time.sleep(interval)
