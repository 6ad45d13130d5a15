"""Constants for tmuxdeck test helpers."""

from __future__ import annotations

import os

#: Session names made by :func:`tmuxdeck.test.random.get_test_session_name`
TEST_SESSION_PREFIX = "tmuxdeck_"

#: Socket names (``-L``) given to servers from the ``server`` fixture
TEST_SOCKET_PREFIX = "tmuxdeck_test"

#: Seconds :func:`tmuxdeck.test.capture.wait_for_capture` polls a pane,
#: from :envvar:`TMUXDECK_CAPTURE_TIMEOUT`
CAPTURE_TIMEOUT_SECONDS = float(os.getenv("TMUXDECK_CAPTURE_TIMEOUT", 8))

#: Pause between two captures, from :envvar:`TMUXDECK_CAPTURE_INTERVAL`
CAPTURE_INTERVAL_SECONDS = float(os.getenv("TMUXDECK_CAPTURE_INTERVAL", 0.05))
