"""Build, run and decode tmux commands.

tmuxdeck.invoker
~~~~~~~~~~~~~~~~

:class:`CommandInvoker` has one method per supported operation. Each runs a
single tmux process and either returns a :mod:`~tmuxdeck.response` variant or
raises one of :exc:`~tmuxdeck.exc.LaunchFailed`,
:exc:`~tmuxdeck.exc.CommandFailed` or :exc:`~tmuxdeck.exc.DecodeFailed`.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import subprocess
import typing as t

from . import exc
from .common import pane_target, tmux_cmd, window_target
from .pane import PANE_FORMAT, Pane, PaneCapture
from .response import (
    PaneCaptured,
    PanesListed,
    SessionCreated,
    SessionsListed,
    WindowsListed,
)
from .session import SESSION_FORMAT, Session
from .window import WINDOW_FORMAT, Window

if t.TYPE_CHECKING:
    import pathlib
    from collections.abc import Sequence

    from .neo import Record
    from .response import Response

    RecordT = t.TypeVar("RecordT", bound=Record)

logger = logging.getLogger(__name__)

#: Flags for ``capture-pane``: keep escape sequences, print to stdout, join
#: wrapped lines.
CAPTURE_PANE_FLAGS = ("-e", "-p", "-J")


def exact(session_name: str) -> str:
    """Return session name prefixed so tmux matches it exactly, not by prefix.

    >>> exact("work")
    '=work'
    """
    return f"={session_name}"


#
# Commands
#
@dataclasses.dataclass(frozen=True)
class ListSessions:
    """``$ tmux list-sessions``."""


@dataclasses.dataclass(frozen=True)
class ListWindows:
    """``$ tmux list-windows -t <session_name>``."""

    session_name: str


@dataclasses.dataclass(frozen=True)
class ListPanes:
    """``$ tmux list-panes -t <session_name>:<window_index>``."""

    session_name: str
    window_index: int


@dataclasses.dataclass(frozen=True)
class CapturePane:
    """``$ tmux capture-pane -e -p -J -t <session>:<window>.<pane>``."""

    session_name: str
    window_index: int
    pane_index: int


@dataclasses.dataclass(frozen=True)
class NewSession:
    """``$ tmux new-session -d -s <session_name>``."""

    session_name: str


@dataclasses.dataclass(frozen=True)
class KillSession:
    """``$ tmux kill-session -t <session_name>``."""

    session_name: str


@dataclasses.dataclass(frozen=True)
class RenameSession:
    """``$ tmux rename-session -t <old_session_name> <new_session_name>``."""

    old_session_name: str
    new_session_name: str


Command = t.Union[
    ListSessions,
    ListWindows,
    ListPanes,
    CapturePane,
    NewSession,
    KillSession,
    RenameSession,
]


class CommandInvoker:
    """Run tmux commands against one server and classify their outcome.

    Parameters
    ----------
    tmux_bin : str, optional
        Binary name or path, looked up on ``$PATH``. Defaults to ``tmux``.
    socket_name : str, optional
        Passthrough to ``[-L socket-name]``.
    socket_path : str or PathLike, optional
        Passthrough to ``[-S socket-path]``.
    config_file : str, optional
        Passthrough to ``[-f file]``.

    Examples
    --------
    >>> invoker = CommandInvoker(socket_name="deck")
    >>> invoker.server_args()
    ['-Ldeck']
    """

    tmux_bin: str | None = None
    socket_name: str | None = None
    socket_path: str | pathlib.Path | None = None
    config_file: str | None = None

    def __init__(
        self,
        tmux_bin: str | None = None,
        socket_name: str | None = None,
        socket_path: str | pathlib.Path | None = None,
        config_file: str | None = None,
    ) -> None:
        if tmux_bin is not None:
            self.tmux_bin = tmux_bin
        if socket_path is not None:
            self.socket_path = socket_path
        elif socket_name is not None:
            self.socket_name = socket_name
        if config_file is not None:
            self.config_file = config_file

    def __repr__(self) -> str:
        """Representation of :class:`CommandInvoker` object."""
        if self.socket_path is not None:
            return f"{self.__class__.__name__}(socket_path={self.socket_path})"
        return f"{self.__class__.__name__}(socket_name={self.socket_name or 'default'})"

    #
    # Command
    #
    def server_args(self) -> list[str]:
        """Return global tmux flags selecting this server."""
        svr_args: list[str] = []
        if self.socket_name:
            svr_args.insert(0, f"-L{self.socket_name}")
        if self.socket_path:
            svr_args.insert(0, f"-S{self.socket_path}")
        if self.config_file:
            svr_args.insert(0, f"-f{self.config_file}")
        return svr_args

    def cmd(
        self,
        cmd: str,
        *args: t.Any,
        target: str | None = None,
        env: t.Mapping[str, str] | None = None,
    ) -> tmux_cmd:
        """Execute tmux command respective of socket name and file, return output.

        No classification happens here: the result is returned whatever the
        exit status. Use the operation methods for typed results.

        Parameters
        ----------
        cmd : str
            tmux command, e.g. ``list-sessions``.
        target : str, optional
            Passed as ``-t <target>`` right after ``cmd``.
        env : mapping, optional
            Environment for the tmux process.

        Returns
        -------
        :class:`common.tmux_cmd`
        """
        cmd_args = ["-t", target, *args] if target is not None else [*args]
        return tmux_cmd(
            *self.server_args(),
            cmd,
            *cmd_args,
            tmux_bin=self.tmux_bin,
            env=env,
        )

    def run(
        self,
        operation: str,
        *args: t.Any,
        target: str | None = None,
        tmux_target: str | None = None,
        env: t.Mapping[str, str] | None = None,
    ) -> tmux_cmd:
        """Run ``operation`` and raise unless tmux exited successfully.

        Parameters
        ----------
        operation : str
            tmux command name, also used in error reports.
        target : str, optional
            Target as the caller addressed it, used in error reports.
        tmux_target : str, optional
            Target passed to tmux via ``-t``, often an exact-match form of
            ``target``. Omitted when None.

        Raises
        ------
        :exc:`exc.LaunchFailed`
        :exc:`exc.CommandFailed`
        """
        try:
            proc = self.cmd(operation, *args, target=tmux_target, env=env)
        except exc.TmuxCommandNotFound as e:
            raise exc.TmuxCommandNotFound(operation, target, e.error) from e
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            raise exc.LaunchFailed(operation, target, e) from e

        if proc.returncode != 0:
            logger.debug(
                "%s failed with %s: %s",
                subprocess.list2cmdline(proc.cmd),
                proc.returncode,
                proc.stderr,
            )
            raise exc.CommandFailed(
                operation,
                target,
                stdout=proc.stdout,
                stderr=proc.stderr,
                returncode=proc.returncode,
            )
        return proc

    @staticmethod
    def decode(
        record: type[RecordT],
        lines: Sequence[str],
        operation: str,
        target: str | None = None,
    ) -> tuple[RecordT, ...]:
        """Decode every non-blank line into ``record``, in order.

        The first line that fails aborts the whole response.

        Raises
        ------
        :exc:`exc.DecodeFailed`
        """
        records = []
        for line in lines:
            if not line.strip():
                continue
            try:
                records.append(record.from_line(line))
            except exc.DecodeError as e:
                logger.debug("%s: could not decode %r: %s", operation, line, e)
                raise exc.DecodeFailed(operation, target, line=line, error=e) from e
        return tuple(records)

    #
    # Operations
    #
    def list_sessions(self) -> SessionsListed:
        """Return sessions on the server.

        ``$ tmux list-sessions -F <format>``
        """
        proc = self.run("list-sessions", f"-F{SESSION_FORMAT}")
        return SessionsListed(
            sessions=self.decode(Session, proc.stdout, "list-sessions"),
        )

    def list_windows(self, session_name: str) -> WindowsListed:
        """Return windows of ``session_name``.

        ``$ tmux list-windows -t <session_name> -F <format>``
        """
        proc = self.run(
            "list-windows",
            f"-F{WINDOW_FORMAT}",
            target=session_name,
            tmux_target=exact(session_name),
        )
        return WindowsListed(
            session_name=session_name,
            windows=self.decode(Window, proc.stdout, "list-windows", session_name),
        )

    def list_panes(self, session_name: str, window_index: int) -> PanesListed:
        """Return panes of window ``window_index`` in ``session_name``.

        ``$ tmux list-panes -t <session_name>:<window_index> -F <format>``
        """
        target = window_target(session_name, window_index)
        proc = self.run(
            "list-panes",
            f"-F{PANE_FORMAT}",
            target=target,
            tmux_target=window_target(exact(session_name), window_index),
        )
        return PanesListed(
            target=target,
            panes=self.decode(Pane, proc.stdout, "list-panes", target),
        )

    def capture_pane(
        self,
        session_name: str,
        window_index: int,
        pane_index: int,
    ) -> PaneCaptured:
        """Return the screen contents of a pane.

        ``$ tmux capture-pane -e -p -J -t <session>:<window>.<pane>``

        Standard output is kept as-is, decoded as UTF-8 with invalid bytes
        replaced.
        """
        target = pane_target(session_name, window_index, pane_index)
        proc = self.run(
            "capture-pane",
            *CAPTURE_PANE_FLAGS,
            target=target,
            tmux_target=pane_target(exact(session_name), window_index, pane_index),
        )
        return PaneCaptured(
            capture=PaneCapture(
                session_name=session_name,
                window_index=window_index,
                pane_index=pane_index,
                buffer=proc.raw_stdout.decode("utf-8", errors="replace"),
            ),
        )

    def new_session(self, session_name: str) -> SessionCreated:
        """Create a detached session and return its descriptor.

        ``$ tmux new-session -d -P -F <format> -s <session_name>``

        ``TMUX`` is dropped from the child's environment so sessions can be
        created from inside a tmux client.
        """
        logger.debug("creating session %s", session_name)
        env = {k: v for k, v in os.environ.items() if k != "TMUX"}
        proc = self.run(
            "new-session",
            "-d",
            "-P",
            f"-F{SESSION_FORMAT}",
            f"-s{session_name}",
            target=session_name,
            env=env,
        )
        sessions = self.decode(Session, proc.stdout, "new-session", session_name)
        if len(sessions) != 1:
            raise exc.DecodeFailed(
                "new-session",
                session_name,
                line="\n".join(proc.stdout),
                error=exc.DecodeError(
                    "\n".join(proc.stdout),
                    reason=f"expected 1 session, got {len(sessions)}",
                ),
            )
        return SessionCreated(session=sessions[0])

    def kill_session(self, session_name: str) -> None:
        """Kill ``session_name``.

        ``$ tmux kill-session -t <session_name>``
        """
        self.run(
            "kill-session",
            target=session_name,
            tmux_target=exact(session_name),
        )
        logger.debug("killed session %s", session_name)

    def rename_session(self, old_session_name: str, new_session_name: str) -> None:
        """Rename ``old_session_name`` to ``new_session_name``.

        ``$ tmux rename-session -t <old_session_name> <new_session_name>``
        """
        self.run(
            "rename-session",
            new_session_name,
            target=old_session_name,
            tmux_target=exact(old_session_name),
        )
        logger.debug("renamed session %s to %s", old_session_name, new_session_name)

    #
    # Dispatch
    #
    def execute(self, command: Command) -> Response | None:
        """Run the operation described by ``command``.

        Examples
        --------
        >>> invoker = CommandInvoker()
        >>> invoker.execute("list-sessions")
        Traceback (most recent call last):
            ...
        TypeError: Unknown tmux command: 'list-sessions'
        """
        if isinstance(command, ListSessions):
            return self.list_sessions()
        if isinstance(command, ListWindows):
            return self.list_windows(command.session_name)
        if isinstance(command, ListPanes):
            return self.list_panes(command.session_name, command.window_index)
        if isinstance(command, CapturePane):
            return self.capture_pane(
                command.session_name,
                command.window_index,
                command.pane_index,
            )
        if isinstance(command, NewSession):
            return self.new_session(command.session_name)
        if isinstance(command, KillSession):
            return self.kill_session(command.session_name)
        if isinstance(command, RenameSession):
            return self.rename_session(
                command.old_session_name,
                command.new_session_name,
            )
        msg = f"Unknown tmux command: {command!r}"
        raise TypeError(msg)

    #
    # Enrichment
    #
    def session_tree(self, session: Session) -> Session:
        """Return copy of ``session`` with its windows and their panes filled.

        Runs one ``list-windows`` plus one ``list-panes`` per window; any
        failure propagates unchanged.
        """
        windows = self.list_windows(session.name).windows
        return dataclasses.replace(
            session,
            windows=tuple(
                dataclasses.replace(
                    window,
                    panes=self.list_panes(session.name, window.index).panes,
                )
                for window in windows
            ),
        )
