"""Provide exceptions used by tmuxdeck.

tmuxdeck.exc
~~~~~~~~~~~~

Every failure surfaced by :class:`~tmuxdeck.invoker.CommandInvoker` carries the
operation name and the resolved tmux target so callers can tell *which* call
went wrong without re-running it.

Notes
-----
Four kinds reach callers:

- :exc:`LaunchFailed`: tmux could not be started or read.
- :exc:`CommandFailed`: tmux ran and exited non-zero.
- :exc:`DecodeFailed`: tmux succeeded but printed a line we cannot decode.
- :exc:`ValidationFailed`: the call was rejected before tmux was launched.
"""

from __future__ import annotations

import typing as t


class TmuxDeckException(Exception):
    """Base exception for all tmuxdeck errors."""


class DecodeError(TmuxDeckException, ValueError):
    """Raised when a single line of tmux output is not a valid record.

    >>> err = DecodeError('{"pane_id": "%1"}', field="index", reason="missing")
    >>> str(err)
    'Malformed line (field index: missing): {"pane_id": "%1"}'
    """

    def __init__(
        self,
        line: str,
        field: str | None = None,
        reason: str = "not a JSON object",
        *args: object,
    ) -> None:
        self.line = line
        self.field = field
        self.reason = reason
        where = f"field {field}: {reason}" if field is not None else reason
        super().__init__(f"Malformed line ({where}): {line}")


class OperationError(TmuxDeckException):
    """Base exception for failures tied to a tmux operation and target."""

    def __init__(self, message: str, operation: str, target: str | None) -> None:
        self.operation = operation
        self.target = target
        super().__init__(message)


def _describe(operation: str, target: str | None) -> str:
    if target is None:
        return operation
    return f"{operation} '{target}'"


class LaunchFailed(OperationError):
    """Raised when the tmux process cannot be started or its output read."""

    def __init__(
        self,
        operation: str,
        target: str | None = None,
        error: BaseException | None = None,
        *args: object,
    ) -> None:
        self.error = error
        super().__init__(
            f"Failed to launch tmux for {_describe(operation, target)}: {error}",
            operation=operation,
            target=target,
        )


class TmuxCommandNotFound(LaunchFailed):
    """Raised when the tmux binary cannot be found on the system."""

    def __init__(
        self,
        operation: str = "tmux",
        target: str | None = None,
        error: BaseException | None = None,
        *args: object,
    ) -> None:
        super().__init__(
            operation=operation,
            target=target,
            error=error or FileNotFoundError("tmux binary not found"),
        )


class CommandFailed(OperationError):
    """Raised when tmux exits with a non-zero status."""

    def __init__(
        self,
        operation: str,
        target: str | None = None,
        stdout: t.Sequence[str] = (),
        stderr: t.Sequence[str] = (),
        returncode: int | None = None,
        *args: object,
    ) -> None:
        self.stdout = list(stdout)
        self.stderr = list(stderr)
        self.returncode = returncode
        detail = " ".join(self.stderr) or " ".join(self.stdout) or "no output"
        super().__init__(
            f"tmux {_describe(operation, target)} exited {returncode}: {detail}",
            operation=operation,
            target=target,
        )


class DecodeFailed(OperationError):
    """Raised when tmux output for an operation cannot be decoded."""

    def __init__(
        self,
        operation: str,
        target: str | None = None,
        line: str = "",
        error: DecodeError | None = None,
        *args: object,
    ) -> None:
        self.line = line
        self.error = error
        reason = error.reason if error is not None else "malformed line"
        if error is not None and error.field is not None:
            reason = f"{error.field}: {reason}"
        super().__init__(
            f"Could not decode output of {_describe(operation, target)} "
            f"({reason}): {line}",
            operation=operation,
            target=target,
        )


class ValidationFailed(TmuxDeckException, ValueError):
    """Raised when a call lacks addressing information tmux needs."""


class BadSessionName(ValidationFailed):
    """Raised if a session name is missing or empty."""

    def __init__(
        self,
        reason: str,
        session_name: str | None = None,
        *args: object,
    ) -> None:
        msg = f"Bad session name: {reason}"
        if session_name is not None:
            msg += f" (session name: {session_name!r})"
        super().__init__(msg)


class BadIndex(ValidationFailed):
    """Raised if a window or pane index is missing or not a non-negative int."""

    def __init__(self, name: str, value: t.Any | None = None, *args: object) -> None:
        super().__init__(f"Bad {name}: {value!r} (expected non-negative int)")


class UnexpectedResponse(TmuxDeckException, AssertionError):
    """Raised when a response is not the variant an operation guarantees."""

    def __init__(self, expected: type, response: object, *args: object) -> None:
        super().__init__(
            f"Expected {expected.__name__}, got {type(response).__name__}",
        )


class WaitTimeout(TmuxDeckException):
    """Raised when a pane never showed the content waited for."""

    def __init__(
        self,
        target: str,
        seconds: float,
        buffer: str = "",
        *args: object,
    ) -> None:
        self.target = target
        self.seconds = seconds
        self.buffer = buffer
        super().__init__(f"Pane {target} did not match within {seconds}s")
