"""Fixtures for tmuxdeck tests."""

from __future__ import annotations

import itertools
import typing as t

import pytest

from tests.helpers import FakeTmux, write_fake_tmux

if t.TYPE_CHECKING:
    import pathlib


class FakeTmuxFactory(t.Protocol):
    """Signature of :func:`fake_tmux`."""

    def __call__(
        self,
        stdout: bytes | str = ...,
        stderr: bytes | str = ...,
        returncode: int = ...,
        interpreter: str = ...,
    ) -> FakeTmux:
        """Write a stub tmux and return it."""
        ...


@pytest.fixture
def fake_tmux(tmp_path: pathlib.Path) -> FakeTmuxFactory:
    """Return factory writing stub tmux binaries into ``tmp_path``."""
    counter = itertools.count()

    def factory(
        stdout: bytes | str = b"",
        stderr: bytes | str = b"",
        returncode: int = 0,
        interpreter: str = "/bin/sh",
    ) -> FakeTmux:
        return write_fake_tmux(
            tmp_path / f"tmux{next(counter)}",
            stdout=stdout,
            stderr=stderr,
            returncode=returncode,
            interpreter=interpreter,
        )

    return factory
