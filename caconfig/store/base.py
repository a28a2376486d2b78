"""Collaborator interfaces: where settings live and who restarts the service.

The engine never talks to the registry or the service manager directly. It
is handed objects that satisfy these protocols, which keeps the core
testable against an in-memory registry.
"""
from __future__ import annotations

import enum
from typing import Protocol


RawValue = str | int | list[str] | None


class BackingStore(Protocol):
    """Registry access for one or more configuration targets."""

    def resolve_active_target(self) -> str | None:
        """Name of the target currently in service, or None."""
        ...

    def read_value(self, target: str, name: str) -> RawValue:
        """Raw stored value, or None when the value is absent."""
        ...

    def write_value(self, target: str, name: str, raw: str) -> bool:
        """Persist one raw value; False means the store rejected it."""
        ...


class RestartOutcome(enum.Enum):
    """Result of asking for a service restart.

    ACKNOWLEDGED: The request was accepted
    SERVICE_NOT_PRESENT: No such service; nothing to restart
    """

    ACKNOWLEDGED = "acknowledged"
    SERVICE_NOT_PRESENT = "service_not_present"


class Restarter(Protocol):
    """Receives the advisory restart signal after settings change."""

    def request_restart(self, service_name: str) -> RestartOutcome:
        ...
