"""Pythonization of the :term:`tmux(1)` session.

tmuxdeck.session
~~~~~~~~~~~~~~~~

"""

from __future__ import annotations

import dataclasses
import logging
import typing as t

from .formats import build_format
from .neo import FieldAlias, Record

if t.TYPE_CHECKING:
    from collections.abc import Mapping

    from typing_extensions import Self

    from .window import Window

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, kw_only=True)
class Session(Record):
    """:term:`tmux(1)` :term:`Session` [session_manual]_, as reported by ``list-sessions``.

    tmux has no ``session_index`` format variable, so ``index`` is not part of
    the ``-F`` template. It is taken from the numeric part of the session id
    (``$3`` is index ``3``); a line that does report ``session_index`` wins.

    Examples
    --------
    >>> Session.from_line(
    ...     '{"session_id": "$1", "session_name": "work", '
    ...     '"session_attached": 0, "session_activity": 1700000000}'
    ... )
    Session(id='$1', index=1, name='work', attached=False, activity=1700000000, windows=())

    References
    ----------
    .. [session_manual] tmux session. openbsd manpage for TMUX(1).
           "A session is a single collection of pseudo terminals under the
           management of tmux.  Each session has one or more windows linked to
           it."

       https://man.openbsd.org/tmux.1#DESCRIPTION.
    """

    FIELD_ALIASES: t.ClassVar[tuple[FieldAlias, ...]] = (
        FieldAlias("id", ("session_id", "id")),
        FieldAlias("index", ("session_index", "index"), kind="int", requested=False),
        FieldAlias("name", ("session_name", "name"), kind="name"),
        FieldAlias(
            "attached",
            ("session_attached", "session_attached_flag", "attached"),
            kind="flag",
        ),
        FieldAlias("activity", ("session_activity", "activity"), kind="int"),
    )

    id: str
    index: int
    name: str
    attached: bool
    activity: int
    windows: tuple[Window, ...] = ()

    @classmethod
    def from_fields(
        cls,
        raw: Mapping[str, t.Any],
        line: str = "",
        **defaults: t.Any,
    ) -> Self:
        """Build session, deriving ``index`` from ``session_id`` when needed."""
        if "index" not in defaults:
            session_id = next(
                (raw[key] for key in ("session_id", "id") if key in raw),
                None,
            )
            if isinstance(session_id, str):
                digits = session_id.lstrip("$")
                if digits.isascii() and digits.isdigit():
                    defaults["index"] = int(digits)
        return super().from_fields(raw, line, **defaults)


SESSION_FORMAT = build_format(Session.FIELD_ALIASES)
