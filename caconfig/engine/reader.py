"""State reader: pull and decode every managed setting."""
from __future__ import annotations

import logging

from caconfig.config.engine import EngineConfig
from caconfig.engine.codec import Snapshot, decode
from caconfig.errors import BackingStoreUnavailable
from caconfig.store.base import BackingStore

logger = logging.getLogger(__name__)


class StateReader:
    """Builds a full current snapshot from the backing store.

    Nothing is cached between calls: another administrative tool may have
    changed the registry since the last read.
    """

    def __init__(self, config: EngineConfig, store: BackingStore) -> None:
        self.config = config
        self.store = store

    def active_target(self) -> str:
        """Resolve the target in service.

        Raises:
            BackingStoreUnavailable: No target is active.
        """
        target = self.store.resolve_active_target()
        if target is None:
            raise BackingStoreUnavailable()
        return target

    def read_current(self, target: str | None = None) -> Snapshot:
        """Read and decode one value per descriptor, in schema order.

        Raises:
            BackingStoreUnavailable: No target is active.
            InvalidFlagValue: A stored bitmask has undefined bits.
        """
        if target is None:
            target = self.active_target()
        snapshot: Snapshot = {}
        for descriptor in self.config.table.settings:
            raw = self.store.read_value(target, descriptor.name)
            snapshot[descriptor.name] = decode(
                descriptor, raw, self.config.list_delimiter
            )
        logger.debug("Read %d settings from %s", len(snapshot), target)
        return snapshot
