"""Helper methods for tmuxdeck.

tmuxdeck.common
~~~~~~~~~~~~~~~

"""

from __future__ import annotations

import logging
import shutil
import subprocess
import typing as t

from . import exc

logger = logging.getLogger(__name__)


class tmux_cmd:
    """Run any :term:`tmux(1)` command through :py:mod:`subprocess`.

    The process handle is owned by this object only for the duration of
    ``__init__``: it is spawned, drained and closed before the constructor
    returns, on success and failure alike.

    Parameters
    ----------
    *args
        Arguments after the tmux binary, e.g. ``'-Lsocket', 'list-sessions'``.
    tmux_bin : str, optional
        Binary name or path. Defaults to ``tmux`` looked up on ``$PATH``.
    env : dict, optional
        Environment for the child process. Defaults to the current one.

    Attributes
    ----------
    cmd : list[str]
        Full argument vector that was executed.
    returncode : int
    raw_stdout : bytes
        Standard output exactly as tmux wrote it.
    stdout : list[str]
        Standard output split into lines, trailing blank lines removed.
    stderr : list[str]
        Non-empty lines of standard error.

    Raises
    ------
    :exc:`exc.TmuxCommandNotFound`
        The binary could not be located.
    OSError
        The binary could not be executed or its pipes could not be read.
    """

    def __init__(
        self,
        *args: t.Any,
        tmux_bin: str | None = None,
        env: t.Mapping[str, str] | None = None,
    ) -> None:
        resolved_bin = shutil.which(tmux_bin or "tmux")
        if not resolved_bin:
            raise exc.TmuxCommandNotFound

        cmd = [resolved_bin]
        cmd += args
        cmd = [str(c) for c in cmd]

        self.cmd = cmd

        try:
            with subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=env,
            ) as process:
                stdout, stderr = process.communicate()
                returncode = process.returncode
        except Exception:
            logger.exception(f"Exception for {subprocess.list2cmdline(cmd)}")
            raise

        self.returncode = returncode
        self.raw_stdout = stdout

        stdout_split = stdout.decode("utf-8", errors="backslashreplace").split("\n")
        # remove trailing newlines from stdout
        while stdout_split and stdout_split[-1] == "":
            stdout_split.pop()
        self.stdout = stdout_split

        stderr_split = stderr.decode("utf-8", errors="backslashreplace").split("\n")
        self.stderr = list(filter(None, stderr_split))  # filter empty values

        logger.debug(
            "self.stdout for {cmd}: {stdout}".format(
                cmd=" ".join(cmd),
                stdout=self.stdout,
            ),
        )


def session_check_name(session_name: str | None) -> None:
    """Raise exception if a session name is missing.

    tmux decides what a valid name is; this only rejects calls that carry no
    name at all, so they never reach tmux.

    Parameters
    ----------
    session_name : str
        Name of session.

    Raises
    ------
    :exc:`exc.BadSessionName`
        Missing or empty session name.

    Examples
    --------
    >>> session_check_name("work")

    >>> session_check_name("")
    Traceback (most recent call last):
        ...
    tmuxdeck.exc.BadSessionName: Bad session name: empty (session name: '')
    """
    if session_name is None:
        raise exc.BadSessionName(reason="missing")
    if not isinstance(session_name, str):
        raise exc.BadSessionName(reason="not a string", session_name=session_name)
    if len(session_name) == 0:
        raise exc.BadSessionName(reason="empty", session_name=session_name)


def index_check(name: str, value: int | None) -> None:
    """Raise exception if a window or pane index is not a non-negative int.

    >>> index_check("window_index", 0)

    >>> index_check("window_index", -1)
    Traceback (most recent call last):
        ...
    tmuxdeck.exc.BadIndex: Bad window_index: -1 (expected non-negative int)
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise exc.BadIndex(name, value)


def window_target(session_name: str, window_index: int) -> str:
    """Return tmux target for a window, ``session:window``.

    >>> window_target("work", 1)
    'work:1'
    """
    return f"{session_name}:{window_index}"


def pane_target(session_name: str, window_index: int, pane_index: int) -> str:
    """Return tmux target for a pane, ``session:window.pane``.

    >>> pane_target("work", 1, 0)
    'work:1.0'
    """
    return f"{window_target(session_name, window_index)}.{pane_index}"
