"""Format templates passed to tmux ``-F``.

tmuxdeck.formats
~~~~~~~~~~~~~~~~

For reference, :term:`tmux(1)` formats are documented under FORMATS:
https://man.openbsd.org/tmux.1#FORMATS

Each template is a JSON object literal in which tmux substitutes
``#{variable}`` tokens, so every output line parses as one object.

tmux prints string values verbatim, so string tokens go through the ``s/``
substitution modifier to backslash ``"`` and ``\\`` before they land inside
JSON quotes.
"""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:
    from collections.abc import Iterable

    from .neo import FieldAlias

STRING_KINDS = frozenset({"str", "name"})

ESCAPE_JSON_STRING = r's/(["\\])/\\\1/'
"""tmux ``s/`` modifier prefixing every ``"`` and ``\\`` with a backslash."""


def format_token(field: FieldAlias) -> str:
    r"""Return the ``#{...}`` token tmux expands for one field.

    >>> from tmuxdeck.neo import FieldAlias
    >>> print(format_token(FieldAlias("index", ("pane_index",), kind="int")))
    #{pane_index}
    >>> print(format_token(FieldAlias("id", ("pane_id",))))
    #{s/(["\\])/\\\1/:pane_id}
    """
    if field.kind in STRING_KINDS:
        return f"#{{{ESCAPE_JSON_STRING}:{field.variable}}}"
    return f"#{{{field.variable}}}"


def format_field(field: FieldAlias) -> str:
    r"""Return the ``"variable": value`` member for one field.

    String fields are quoted; numeric and flag fields are left bare.

    >>> from tmuxdeck.neo import FieldAlias
    >>> print(format_field(FieldAlias("id", ("pane_id",))))
    "pane_id": "#{s/(["\\])/\\\1/:pane_id}"
    >>> print(format_field(FieldAlias("index", ("pane_index",), kind="int")))
    "pane_index": #{pane_index}
    """
    token = format_token(field)
    if field.kind in STRING_KINDS:
        token = f'"{token}"'
    return f'"{field.variable}": {token}'


def build_format(fields: Iterable[FieldAlias]) -> str:
    """Return the ``-F`` template requesting ``fields`` in declared order.

    >>> from tmuxdeck.neo import FieldAlias
    >>> build_format([
    ...     FieldAlias("index", ("pane_index",), kind="int"),
    ...     FieldAlias("active", ("pane_active",), kind="flag"),
    ... ])
    '{"pane_index": #{pane_index}, "pane_active": #{pane_active}}'
    """
    members = ", ".join(format_field(f) for f in fields if f.requested)
    return f"{{{members}}}"
