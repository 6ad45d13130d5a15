"""Wrapper for :term:`tmux(1)` server.

tmuxdeck.server
~~~~~~~~~~~~~~~

"""

from __future__ import annotations

import logging
import typing as t

from .common import index_check, session_check_name
from .invoker import CommandInvoker

if t.TYPE_CHECKING:
    import pathlib

    from .response import (
        PaneCaptured,
        PanesListed,
        SessionCreated,
        SessionsListed,
        WindowsListed,
    )

logger = logging.getLogger(__name__)


class Server:
    """:term:`tmux(1)` :term:`Server` [server_manual]_.

    One method per supported operation. Each checks that the addressing
    arguments tmux needs are present, then forwards to
    :class:`~tmuxdeck.invoker.CommandInvoker` and returns its result as is.

    Parameters
    ----------
    tmux_bin : str, optional
    socket_name : str, optional
    socket_path : str, optional
    config_file : str, optional
    invoker : :class:`~tmuxdeck.invoker.CommandInvoker`, optional
        Use this invoker instead of building one. Cannot be combined with
        the options above.

    Examples
    --------
    >>> Server(socket_name="deck")
    Server(socket_name=deck)

    Missing addressing is rejected before tmux is launched:

    >>> Server(tmux_bin="/nonexistent/tmux").list_windows("")
    Traceback (most recent call last):
        ...
    tmuxdeck.exc.BadSessionName: Bad session name: empty (session name: '')

    References
    ----------
    .. [server_manual] CLIENTS AND SESSIONS. openbsd manpage for TMUX(1)
           "The tmux server manages clients, sessions, windows and panes."

       https://man.openbsd.org/tmux.1#CLIENTS_AND_SESSIONS.
    """

    def __init__(
        self,
        tmux_bin: str | None = None,
        socket_name: str | None = None,
        socket_path: str | pathlib.Path | None = None,
        config_file: str | None = None,
        invoker: CommandInvoker | None = None,
    ) -> None:
        if invoker is not None:
            given = {
                "tmux_bin": tmux_bin,
                "socket_name": socket_name,
                "socket_path": socket_path,
                "config_file": config_file,
            }
            conflicting = [name for name, value in given.items() if value is not None]
            if conflicting:
                msg = f"invoker cannot be combined with {', '.join(conflicting)}"
                raise ValueError(msg)
        else:
            invoker = CommandInvoker(
                tmux_bin=tmux_bin,
                socket_name=socket_name,
                socket_path=socket_path,
                config_file=config_file,
            )
        self.invoker = invoker

    @property
    def socket_name(self) -> str | None:
        """Passthrough to ``[-L socket-name]``."""
        return self.invoker.socket_name

    @property
    def socket_path(self) -> str | pathlib.Path | None:
        """Passthrough to ``[-S socket-path]``."""
        return self.invoker.socket_path

    def list_sessions(self) -> SessionsListed:
        """Return sessions on the server.

        Raises
        ------
        :exc:`exc.LaunchFailed`, :exc:`exc.CommandFailed`, :exc:`exc.DecodeFailed`
        """
        return self.invoker.list_sessions()

    def list_windows(self, session_name: str) -> WindowsListed:
        """Return windows of a session.

        Raises
        ------
        :exc:`exc.BadSessionName`
            ``session_name`` is missing.
        """
        session_check_name(session_name)
        return self.invoker.list_windows(session_name)

    def list_panes(self, session_name: str, window_index: int) -> PanesListed:
        """Return panes of a window, addressed as ``session:window``."""
        session_check_name(session_name)
        index_check("window_index", window_index)
        return self.invoker.list_panes(session_name, window_index)

    def capture_pane(
        self,
        session_name: str,
        window_index: int,
        pane_index: int,
    ) -> PaneCaptured:
        """Capture a pane, addressed as ``session:window.pane``."""
        session_check_name(session_name)
        index_check("window_index", window_index)
        index_check("pane_index", pane_index)
        return self.invoker.capture_pane(session_name, window_index, pane_index)

    def new_session(self, session_name: str) -> SessionCreated:
        """Create a detached session.

        Examples
        --------
        >>> server.new_session("deck_doc").session.name
        'deck_doc'

        Raises
        ------
        :exc:`exc.CommandFailed`
            A session with that name already exists.
        """
        session_check_name(session_name)
        return self.invoker.new_session(session_name)

    def kill_session(self, session_name: str) -> None:
        """Kill a session."""
        session_check_name(session_name)
        self.invoker.kill_session(session_name)

    def rename_session(self, old_session_name: str, new_session_name: str) -> None:
        """Rename a session.

        Raises
        ------
        :exc:`exc.CommandFailed`
            ``old_session_name`` does not exist or ``new_session_name`` does.
        """
        session_check_name(old_session_name)
        session_check_name(new_session_name)
        self.invoker.rename_session(old_session_name, new_session_name)

    #
    # Dunder
    #
    def __eq__(self, other: object) -> bool:
        """Equal operator for :class:`Server` object."""
        if isinstance(other, Server):
            return (
                self.socket_name == other.socket_name
                and self.socket_path == other.socket_path
            )
        return False

    def __repr__(self) -> str:
        """Representation of :class:`Server` object."""
        if self.socket_path is not None:
            return f"{self.__class__.__name__}(socket_path={self.socket_path})"
        return f"{self.__class__.__name__}(socket_name={self.socket_name or 'default'})"
