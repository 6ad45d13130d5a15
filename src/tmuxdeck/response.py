"""Responses returned by tmuxdeck operations.

tmuxdeck.response
~~~~~~~~~~~~~~~~~

:data:`Response` is a closed union: each operation returns exactly one of
its variants. Callers narrow with :func:`isinstance` or :func:`expect`.
"""

from __future__ import annotations

import dataclasses
import typing as t

from . import exc

if t.TYPE_CHECKING:
    from typing import TypeAlias

    from .pane import Pane, PaneCapture
    from .session import Session
    from .window import Window


@dataclasses.dataclass(frozen=True)
class SessionsListed:
    """Sessions on the server, in ``list-sessions`` order."""

    sessions: tuple[Session, ...]


@dataclasses.dataclass(frozen=True)
class WindowsListed:
    """Windows of one session, in ``list-windows`` order."""

    session_name: str
    windows: tuple[Window, ...]


@dataclasses.dataclass(frozen=True)
class PanesListed:
    """Panes of one window, in ``list-panes`` order."""

    target: str
    panes: tuple[Pane, ...]


@dataclasses.dataclass(frozen=True)
class PaneCaptured:
    """Screen contents of one pane."""

    capture: PaneCapture


@dataclasses.dataclass(frozen=True)
class SessionCreated:
    """Descriptor of a session tmux just created."""

    session: Session


Response: TypeAlias = t.Union[
    SessionsListed,
    WindowsListed,
    PanesListed,
    PaneCaptured,
    SessionCreated,
]

VARIANTS: tuple[type, ...] = (
    SessionsListed,
    WindowsListed,
    PanesListed,
    PaneCaptured,
    SessionCreated,
)

R = t.TypeVar("R", SessionsListed, WindowsListed, PanesListed, PaneCaptured, SessionCreated)


def expect(response: object, variant: type[R]) -> R:
    """Return ``response`` if it is a ``variant``, raise otherwise.

    A mismatch means an operation was routed wrongly, so it raises
    :exc:`~tmuxdeck.exc.UnexpectedResponse`, an :exc:`AssertionError`.

    >>> expect(SessionsListed(sessions=()), SessionsListed)
    SessionsListed(sessions=())

    >>> expect(SessionsListed(sessions=()), PanesListed)
    Traceback (most recent call last):
        ...
    tmuxdeck.exc.UnexpectedResponse: Expected PanesListed, got SessionsListed
    """
    if not isinstance(response, variant):
        raise exc.UnexpectedResponse(variant, response)
    return response
