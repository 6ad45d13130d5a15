"""tmuxdeck, a typed query and command layer over a running tmux server."""

from .__about__ import (
    __author__,
    __copyright__,
    __description__,
    __license__,
    __package_name__,
    __title__,
    __version__,
)
from .invoker import CommandInvoker
from .pane import Pane, PaneCapture
from .response import (
    PaneCaptured,
    PanesListed,
    Response,
    SessionCreated,
    SessionsListed,
    WindowsListed,
    expect,
)
from .server import Server
from .session import Session
from .window import Window

__all__ = (
    "CommandInvoker",
    "Pane",
    "PaneCapture",
    "PaneCaptured",
    "PanesListed",
    "Response",
    "Server",
    "Session",
    "SessionCreated",
    "SessionsListed",
    "Window",
    "WindowsListed",
    "__author__",
    "__copyright__",
    "__description__",
    "__license__",
    "__package_name__",
    "__title__",
    "__version__",
    "expect",
)
