"""Test helpers: stub tmux executables and sample output lines."""

from __future__ import annotations

import json
import pathlib
import re
import stat
import typing as t

SESSION_FIELDS: dict[str, t.Any] = {
    "session_id": "$1",
    "session_name": "work",
    "session_attached": 0,
    "session_activity": 1700000000,
}

WINDOW_FIELDS: dict[str, t.Any] = {
    "window_id": "@1",
    "window_index": 1,
    "window_name": "zsh",
    "window_activity": 1700000000,
    "window_width": 80,
    "window_height": 24,
    "window_cell_width": 8,
    "window_cell_height": 16,
    "window_zoomed_flag": 0,
    "window_marked_flag": 0,
}

PANE_FIELDS: dict[str, t.Any] = {
    "pane_id": "%1",
    "pane_index": 0,
    "pane_width": 80,
    "pane_height": 24,
    "pane_active": 1,
    "pane_current_command": "zsh",
}


def make_line(base: dict[str, t.Any], drop: t.Iterable[str] = (), **changes: t.Any) -> str:
    """Return JSON line from ``base`` with ``changes`` applied and ``drop`` removed."""
    fields = {**base, **changes}
    for key in drop:
        fields.pop(key)
    return json.dumps(fields)


FORMAT_TOKEN_RE = re.compile(r"#\{(?P<escape>s/[^:]*/:)?(?P<variable>\w+)\}")


def fill_format(template: str, values: t.Mapping[str, t.Any]) -> str:
    """Expand the ``#{...}`` tokens of a ``-F`` template the way tmux does."""

    def replace(match: re.Match[str]) -> str:
        value = str(values[match.group("variable")])
        if match.group("escape"):
            value = re.sub(r'(["\\])', r"\\\1", value)
        return value

    return FORMAT_TOKEN_RE.sub(replace, template)


class FakeTmux(t.NamedTuple):
    """Stub tmux binary that records its argv and replays canned output."""

    path: pathlib.Path
    args_file: pathlib.Path

    @property
    def bin(self) -> str:
        """Return path suitable for ``tmux_bin``."""
        return str(self.path)

    def args(self) -> list[str]:
        """Return argv of the last invocation, without the binary."""
        if not self.args_file.exists():
            return []
        return self.args_file.read_text(encoding="utf-8").splitlines()

    @property
    def called(self) -> bool:
        """Return True if the stub ran at least once."""
        return self.args_file.exists()


def write_fake_tmux(
    directory: pathlib.Path,
    stdout: bytes | str = b"",
    stderr: bytes | str = b"",
    returncode: int = 0,
    interpreter: str = "/bin/sh",
) -> FakeTmux:
    """Write a stub tmux into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    if isinstance(stdout, str):
        stdout = stdout.encode("utf-8")
    if isinstance(stderr, str):
        stderr = stderr.encode("utf-8")

    out_file = directory / "stdout"
    err_file = directory / "stderr"
    args_file = directory / "args"
    out_file.write_bytes(stdout)
    err_file.write_bytes(stderr)

    script = directory / "tmux"
    script.write_text(
        f"#!{interpreter}\n"
        f"printf '%s\\n' \"$@\" > '{args_file}'\n"
        f"cat '{out_file}'\n"
        f"cat '{err_file}' >&2\n"
        f"exit {returncode}\n",
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return FakeTmux(path=script, args_file=args_file)
