"""Pythonization of the :term:`tmux(1)` pane.

tmuxdeck.pane
~~~~~~~~~~~~~

"""

from __future__ import annotations

import dataclasses
import logging
import typing as t

from .common import pane_target
from .formats import build_format
from .neo import FieldAlias, Record

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, kw_only=True)
class Pane(Record):
    """:term:`tmux(1)` :term:`Pane` [pane_manual]_, as reported by ``list-panes``.

    Examples
    --------
    >>> Pane.from_line(
    ...     '{"pane_id": "%1", "pane_index": 0, "pane_width": 80, '
    ...     '"pane_height": 24, "pane_active": 1, "pane_current_command": "zsh"}'
    ... )
    Pane(id='%1', index=0, width=80, height=24, active=True, current_command='zsh')

    References
    ----------
    .. [pane_manual] tmux pane. openbsd manpage for TMUX(1).
           "Each window displayed by tmux may be split into one or more
           panes; each pane takes up a certain area of the display and is
           a separate terminal."

       https://man.openbsd.org/tmux.1#WINDOWS_AND_PANES.
    """

    FIELD_ALIASES: t.ClassVar[tuple[FieldAlias, ...]] = (
        FieldAlias("id", ("pane_id", "id")),
        FieldAlias("index", ("pane_index", "index"), kind="int"),
        FieldAlias("width", ("pane_width", "width"), kind="int"),
        FieldAlias("height", ("pane_height", "height"), kind="int"),
        FieldAlias("active", ("pane_active", "pane_active_flag", "active"), kind="flag"),
        FieldAlias(
            "current_command",
            ("pane_current_command", "current_command"),
        ),
    )

    id: str
    index: int
    width: int
    height: int
    active: bool
    current_command: str


PANE_FORMAT = build_format(Pane.FIELD_ALIASES)


@dataclasses.dataclass(frozen=True, kw_only=True)
class PaneCapture:
    """Snapshot of a pane's screen, as printed by ``capture-pane -e -p -J``.

    ``buffer`` holds the raw screen text, escape sequences included.

    >>> PaneCapture(session_name="work", window_index=1, pane_index=0, buffer="$ ").target
    'work:1.0'
    """

    session_name: str
    window_index: int
    pane_index: int
    buffer: str

    @property
    def target(self) -> str:
        """Return tmux target this capture was taken from."""
        return pane_target(self.session_name, self.window_index, self.pane_index)

    @property
    def lines(self) -> list[str]:
        """Return buffer split into lines."""
        return self.buffer.splitlines()
