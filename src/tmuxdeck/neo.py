"""Tools for hydrating tmux output lines into python dataclass objects.

tmuxdeck.neo
~~~~~~~~~~~~

Each record type declares a ``FIELD_ALIASES`` table. An entry maps one
dataclass field to the tmux format variables that may carry it, plus how the
raw value is coerced:

- ``str``: must be a JSON string.
- ``int``: non-negative integer, quoted (``"12"``) or bare (``12``).
- ``flag``: ``0``/``1`` (quoted or bare) or a JSON boolean, becomes ``bool``.
- ``name``: a JSON string tmux stored vis(3) encoded (session and window
  names); the encoding is undone with :func:`unvis`.

The first alias is the variable requested from tmux; the rest are spellings
accepted when decoding.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import re
import typing as t

from . import exc

if t.TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from typing_extensions import Self

logger = logging.getLogger(__name__)

FieldKind = t.Literal["str", "name", "int", "flag"]

OutputRaw = dict[str, t.Any]

VIS_ESCAPE_RE = re.compile(r"\\([0-7]{3}|.)", re.DOTALL)

VIS_CSTYLE = {
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "s": " ",
    "t": "\t",
    "v": "\v",
}


@dataclasses.dataclass(frozen=True)
class FieldAlias:
    """Map a record field to the tmux variables that may report it.

    >>> FieldAlias("id", ("pane_id", "id")).variable
    'pane_id'
    """

    name: str
    aliases: tuple[str, ...]
    kind: FieldKind = "str"
    requested: bool = True
    """Whether the variable is part of the ``-F`` template sent to tmux."""

    @property
    def variable(self) -> str:
        """Return the tmux format variable requested for this field."""
        return self.aliases[0]


def parse_line(line: str) -> OutputRaw:
    """Parse one line of tmux output as a JSON object literal.

    >>> parse_line('{"pane_id": "%1", "pane_index": 0}')
    {'pane_id': '%1', 'pane_index': 0}

    >>> parse_line('%1 0')
    Traceback (most recent call last):
        ...
    tmuxdeck.exc.DecodeError: Malformed line (not a JSON object): %1 0
    """
    try:
        raw = json.loads(line)
    except ValueError as e:
        raise exc.DecodeError(line) from e
    if not isinstance(raw, dict):
        raise exc.DecodeError(line)
    return raw


def unvis(value: str) -> str:
    r"""Undo the vis(3) encoding tmux applies to session and window names.

    tmux stores names with ``\\`` doubled, control characters as octal
    (``\033``) and tab or newline in C style (``\t``, ``\n``).

    >>> unvis(r"esc\033name")
    'esc\x1bname'
    >>> unvis(r"back\\slash")
    'back\\slash'
    >>> unvis(r"tab\there")
    'tab\there'
    >>> unvis('say "hi"')
    'say "hi"'
    """

    def replace(match: re.Match[str]) -> str:
        code = match.group(1)
        if len(code) == 3:
            return chr(int(code, 8))
        return VIS_CSTYLE.get(code, code)

    return VIS_ESCAPE_RE.sub(replace, value)


def _to_int(value: t.Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        sign = stripped[:1] == "-"
        digits = stripped[1:] if sign else stripped
        if digits.isascii() and digits.isdigit():
            return -int(digits) if sign else int(digits)
    return None


def coerce_value(field: FieldAlias, value: t.Any, line: str) -> t.Any:
    """Coerce a raw JSON value according to ``field.kind``.

    >>> flag = FieldAlias("active", ("pane_active",), kind="flag")
    >>> coerce_value(flag, 1, ""), coerce_value(flag, True, "")
    (True, True)
    >>> coerce_value(flag, "0", ""), coerce_value(flag, False, "")
    (False, False)
    """
    if field.kind in {"str", "name"}:
        if not isinstance(value, str):
            raise exc.DecodeError(line, field=field.name, reason="expected string")
        return unvis(value) if field.kind == "name" else value

    if field.kind == "flag" and isinstance(value, bool):
        return value
    if field.kind == "flag" and isinstance(value, str) and value in {"true", "false"}:
        return value == "true"

    number = _to_int(value)
    if number is None:
        reason = "expected flag" if field.kind == "flag" else "expected integer"
        raise exc.DecodeError(line, field=field.name, reason=reason)
    if number < 0:
        raise exc.DecodeError(line, field=field.name, reason="negative value")

    if field.kind == "flag":
        # session_attached counts clients, so anything non-zero is set
        return number != 0
    return number


def decode_fields(
    fields: Iterable[FieldAlias],
    raw: Mapping[str, t.Any],
    line: str,
    defaults: Mapping[str, t.Any] | None = None,
) -> dict[str, t.Any]:
    """Resolve every field of a record from a parsed line.

    Parameters
    ----------
    fields : iterable of :class:`FieldAlias`
    raw : mapping
        Parsed line, keyed by tmux variable name.
    line : str
        Original line, kept for error reporting.
    defaults : mapping, optional
        Values for fields the line does not report, keyed by field name.

    Raises
    ------
    :exc:`exc.DecodeError`
        A field is absent (and has no default) or has the wrong shape.
    """
    defaults = defaults or {}
    values: dict[str, t.Any] = {}
    for field in fields:
        key = next((alias for alias in field.aliases if alias in raw), None)
        if key is None:
            if field.name in defaults:
                values[field.name] = defaults[field.name]
                continue
            raise exc.DecodeError(line, field=field.name, reason="missing")
        values[field.name] = coerce_value(field, raw[key], line)
    return values


class Record:
    """Mixin giving a dataclass a decoder from tmux output lines."""

    FIELD_ALIASES: t.ClassVar[tuple[FieldAlias, ...]] = ()

    @classmethod
    def from_fields(
        cls,
        raw: Mapping[str, t.Any],
        line: str = "",
        **defaults: t.Any,
    ) -> Self:
        """Build record from an already parsed mapping of tmux variables."""
        values = decode_fields(cls.FIELD_ALIASES, raw, line or repr(raw), defaults)
        return cls(**values)

    @classmethod
    def from_line(cls, line: str, **defaults: t.Any) -> Self:
        """Build record from one line of ``-F`` formatted tmux output.

        Keyword arguments supply fields the line does not carry.
        """
        return cls.from_fields(parse_line(line), line, **defaults)
