"""The declarative resource: get, test, set.

This is the surface an orchestration host calls. Each call starts from a
fresh read of the registry.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from caconfig.config.engine import EngineConfig
from caconfig.engine.applier import StateApplier
from caconfig.engine.codec import Snapshot, Value
from caconfig.engine.comparator import diff, normalize_desired
from caconfig.engine.reader import StateReader
from caconfig.store.base import BackingStore, RestartOutcome, Restarter

logger = logging.getLogger(__name__)


class CertificationAuthoritySettings:
    """Reconciles the settings of the active certification authority.

    `restarter` receives the restart request after any write; when it is
    None the request is only logged.
    """

    def __init__(
        self,
        store: BackingStore,
        restarter: Restarter | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.store = store
        self.restarter = restarter
        self.reader = StateReader(self.config, store)
        self.applier = StateApplier(self.config, store)

    def get(self) -> Snapshot:
        """Full current state, one entry per schema setting."""
        return self.reader.read_current()

    def test(self, desired: Mapping[str, object]) -> bool:
        """True when every desired setting already matches."""
        return not self.drift(desired)

    def drift(self, desired: Mapping[str, object]) -> dict[str, tuple[Value, Value]]:
        """Differing settings as name -> (current, desired), in schema order."""
        current = self.reader.read_current()
        wanted = normalize_desired(self.config.table, desired)
        names = diff(self.config.table, current, wanted)
        return {
            name: (current[name], wanted[name])
            for name in self.config.table.names
            if name in names
        }

    def set(self, desired: Mapping[str, object]) -> int:
        """Converge the registry on `desired` and return the number of writes.

        A restart is requested exactly once when at least one write happened.
        """
        target = self.reader.active_target()
        current = self.reader.read_current(target)
        wanted = normalize_desired(self.config.table, desired)
        names = diff(self.config.table, current, wanted)
        result = self.applier.apply(names, wanted, target=target)

        if result.restart_required:
            self._request_restart()
        logger.debug("Set wrote %d settings on %s", result.count, target)
        return result.count

    def _request_restart(self) -> None:
        service = self.config.service_name
        if self.restarter is None:
            logger.info("Restart of %s required", service)
            return
        outcome = self.restarter.request_restart(service)
        if outcome is RestartOutcome.SERVICE_NOT_PRESENT:
            logger.info("Service %s not present; nothing to restart", service)
