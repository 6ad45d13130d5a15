"""Pythonization of the :term:`tmux(1)` window.

tmuxdeck.window
~~~~~~~~~~~~~~~

"""

from __future__ import annotations

import dataclasses
import logging
import typing as t

from .formats import build_format
from .neo import FieldAlias, Record

if t.TYPE_CHECKING:
    from .pane import Pane

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, kw_only=True)
class Window(Record):
    """:term:`tmux(1)` :term:`Window` [window_manual]_, as reported by ``list-windows``.

    ``panes`` is left empty by ``list-windows``; see
    :meth:`tmuxdeck.invoker.CommandInvoker.session_tree` to fill it.

    Examples
    --------
    >>> window = Window.from_line(
    ...     '{"window_id": "@1", "window_index": 0, "window_name": "zsh", '
    ...     '"window_activity": 1700000000, "window_width": 80, '
    ...     '"window_height": 24, "window_cell_width": 8, '
    ...     '"window_cell_height": 16, "window_zoomed_flag": 0, '
    ...     '"window_marked_flag": false}'
    ... )
    >>> window.name, window.zoomed, window.marked, window.panes
    ('zsh', False, False, ())

    References
    ----------
    .. [window_manual] tmux window. openbsd manpage for TMUX(1).
           "Each session has one or more windows linked to it. [...] Each
           window displayed by tmux may be split into one or more panes."

       https://man.openbsd.org/tmux.1#WINDOWS_AND_PANES.
    """

    FIELD_ALIASES: t.ClassVar[tuple[FieldAlias, ...]] = (
        FieldAlias("id", ("window_id", "id")),
        FieldAlias("index", ("window_index", "index"), kind="int"),
        FieldAlias("name", ("window_name", "name"), kind="name"),
        FieldAlias("activity", ("window_activity", "activity"), kind="int"),
        FieldAlias("width", ("window_width", "width"), kind="int"),
        FieldAlias("height", ("window_height", "height"), kind="int"),
        FieldAlias("cell_width", ("window_cell_width", "cell_width"), kind="int"),
        FieldAlias("cell_height", ("window_cell_height", "cell_height"), kind="int"),
        FieldAlias(
            "zoomed",
            ("window_zoomed_flag", "window_zoomed", "zoomed", "is_zoomed"),
            kind="flag",
        ),
        FieldAlias(
            "marked",
            ("window_marked_flag", "window_marked", "marked", "is_marked"),
            kind="flag",
        ),
    )

    id: str
    index: int
    name: str
    activity: int
    width: int
    height: int
    cell_width: int
    cell_height: int
    zoomed: bool
    marked: bool
    panes: tuple[Pane, ...] = ()


WINDOW_FORMAT = build_format(Window.FIELD_ALIASES)
