"""tmuxdeck pytest plugin."""

from __future__ import annotations

import contextlib
import getpass
import logging
import os
import pathlib
import shutil
import typing as t

import pytest

from tmuxdeck import exc
from tmuxdeck.server import Server
from tmuxdeck.test.constants import TEST_SOCKET_PREFIX
from tmuxdeck.test.random import get_test_session_name, namer

if t.TYPE_CHECKING:
    from tmuxdeck.session import Session

logger = logging.getLogger(__name__)
USING_ZSH = "zsh" in os.getenv("SHELL", "")


@pytest.fixture(scope="session")
def home_path(tmp_path_factory: pytest.TempPathFactory) -> pathlib.Path:
    """Temporary `/home/` path."""
    return tmp_path_factory.mktemp("home")


@pytest.fixture(scope="session")
def home_user_name() -> str:
    """Return default username to set for :func:`user_path` fixture."""
    return getpass.getuser()


@pytest.fixture(scope="session")
def user_path(home_path: pathlib.Path, home_user_name: str) -> pathlib.Path:
    """Ensure and return temporary user directory.

    Used by: :func:`config_file`, :func:`zshrc`
    """
    p = home_path / home_user_name
    p.mkdir()
    return p


@pytest.fixture(scope="session")
def zshrc(user_path: pathlib.Path) -> pathlib.Path:
    """Suppress ZSH default message.

    Needs a startup file .zshenv, .zprofile, .zshrc, .zlogin.
    """
    p = user_path / ".zshrc"
    p.touch()
    return p


@pytest.fixture(scope="session")
def config_file(user_path: pathlib.Path) -> pathlib.Path:
    """Return fixture for ``.tmux.conf`` configuration.

    - ``base-index -g 1``

    These guarantee pane and windows targets can be reliably referenced and asserted.
    """
    c = user_path / ".tmux.conf"
    c.write_text(
        """
set -g base-index 1
    """,
        encoding="utf-8",
    )
    return c


@pytest.fixture
def set_home(
    monkeypatch: pytest.MonkeyPatch,
    user_path: pathlib.Path,
) -> None:
    """Point ``$HOME`` at :func:`user_path` so shells started by tmux stay quiet."""
    monkeypatch.setenv("HOME", str(user_path))


@pytest.fixture
def server(
    request: pytest.FixtureRequest,
    set_home: None,
    config_file: pathlib.Path,
) -> Server:
    """Return new, temporary :class:`tmuxdeck.Server` on its own socket.

    Skips the test when tmux is not installed. The tmux server behind it is
    killed on teardown.

    >>> from tmuxdeck.server import Server

    >>> def test_example(server: Server) -> None:
    ...     server.new_session('my session')
    ...     assert len(server.list_sessions().sessions) == 1
    """
    if shutil.which("tmux") is None:
        pytest.skip("tmux not installed")

    if USING_ZSH:
        request.getfixturevalue("zshrc")

    server = Server(
        socket_name=f"{TEST_SOCKET_PREFIX}{next(namer)}",
        config_file=str(config_file),
    )

    def fin() -> None:
        server.invoker.cmd("kill-server")

    request.addfinalizer(fin)

    return server


@pytest.fixture
def session(request: pytest.FixtureRequest, server: Server) -> Session:
    """Return new, temporary :class:`tmuxdeck.Session` on :func:`server`.

    >>> from tmuxdeck.session import Session

    >>> def test_example(session: Session) -> None:
    ...     assert session.name.startswith('tmuxdeck_')
    """
    session_name = get_test_session_name(server=server)
    session = server.new_session(session_name).session

    def fin() -> None:
        with contextlib.suppress(exc.CommandFailed):
            server.kill_session(session.name)

    request.addfinalizer(fin)

    return session
