"""Restart collaborators.

The engine only ever *asks* for a restart. These implementations decide what
asking means: record it (tests) or tell the operator (CLI).
"""
from __future__ import annotations

from collections.abc import Iterable

from caconfig.console import logger
from caconfig.store.base import RestartOutcome


class RecordingRestarter:
    """Records every restart request.

    Services not listed in `services` answer SERVICE_NOT_PRESENT.
    """

    def __init__(self, services: Iterable[str] = ("CertSvc",)) -> None:
        self.services = set(services)
        self.requests: list[str] = []

    def request_restart(self, service_name: str) -> RestartOutcome:
        self.requests.append(service_name)
        if service_name not in self.services:
            return RestartOutcome.SERVICE_NOT_PRESENT
        return RestartOutcome.ACKNOWLEDGED


class AdvisoryRestarter:
    """Prints the restart advisory for the operator to act on."""

    def request_restart(self, service_name: str) -> RestartOutcome:
        logger.warning(
            f"Restart the [highlight]{service_name}[/highlight] service "
            "for the new settings to take effect."
        )
        return RestartOutcome.ACKNOWLEDGED
