"""Errors raised by the reconciliation engine.

Every failure aborts the current operation and names the setting (or target)
at fault. Nothing here is retried internally; re-running `set` is safe since
the whole cycle is idempotent.
"""
from __future__ import annotations


class ReconcileError(RuntimeError):
    """Base class for all engine errors."""


class BackingStoreUnavailable(ReconcileError):
    """No active configuration target could be resolved."""

    def __init__(self, detail: str = "no active certification authority found") -> None:
        super().__init__(f"Backing store unavailable: {detail}")
        self.detail = detail


class InvalidFlagValue(ReconcileError):
    """A stored bitmask carries bits outside the defined flags."""

    def __init__(self, name: str, value: object, allowed: int) -> None:
        super().__init__(
            f"Invalid flag value for {name!r}: {value!r} "
            f"(allowed bits: 0-{allowed})"
        )
        self.name = name
        self.value = value
        self.allowed = allowed


class UnknownFlagName(ReconcileError):
    """A desired flag set names a flag the schema does not define."""

    def __init__(self, name: str, flags: list[str]) -> None:
        super().__init__(f"Unknown flag name(s) for {name!r}: {', '.join(flags)}")
        self.name = name
        self.flags = flags


class WriteFailed(ReconcileError):
    """The backing store rejected a write; earlier writes are kept."""

    def __init__(
        self,
        name: str,
        written: tuple[str, ...] = (),
        reason: str | None = None,
    ) -> None:
        message = f"Write failed for {name!r}"
        if reason:
            message += f": {reason}"
        if written:
            message += f" (already written: {', '.join(written)})"
        super().__init__(message)
        self.name = name
        self.written = written
        self.reason = reason


class UnknownSettingName(ReconcileError, KeyError):
    """A setting name is not in the schema table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown setting name: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])
