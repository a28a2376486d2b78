"""State applier: write the settings that differ, and nothing else.

Writing is two-phase. First every pending value is encoded, which is where
bad input (an unknown flag name, a null) is rejected; only when the whole
batch encodes cleanly does the first write go out. A store that rejects a
write mid-batch stops the batch, and whatever was already written stays
written. Re-running the full read/diff/apply cycle picks up from there,
since applied settings no longer show up in the diff.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from caconfig.config.engine import EngineConfig
from caconfig.engine.codec import Value, encode
from caconfig.errors import BackingStoreUnavailable, WriteFailed
from caconfig.store.base import BackingStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PendingWrite:
    """One encoded value about to be handed to the store."""

    name: str
    encoded: str


@dataclass(frozen=True, slots=True)
class ApplyResult:
    """What a batch of writes did.

    `restart_required` is advisory: the applier never restarts anything.
    """

    written: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.written)

    @property
    def restart_required(self) -> bool:
        return self.count > 0


class StateApplier:
    """Encodes and writes differing settings, one write per setting."""

    def __init__(self, config: EngineConfig, store: BackingStore) -> None:
        self.config = config
        self.store = store

    def plan(self, names: Iterable[str], desired: Mapping[str, Value]) -> list[PendingWrite]:
        """Encode every pending write in schema order.

        Raises:
            UnknownSettingName: A name is not in the schema.
            UnknownFlagName: A flag set names an undefined flag.
            ValueError: A name has no desired value.
        """
        table = self.config.table
        wanted = set(names)
        for name in wanted:
            table.descriptor(name)
            if name not in desired:
                raise ValueError(f"No desired value for {name!r}")

        return [
            PendingWrite(
                name=d.name,
                encoded=encode(d, desired[d.name], self.config.list_delimiter),
            )
            for d in table.settings
            if d.name in wanted
        ]

    def apply(
        self,
        names: Iterable[str],
        desired: Mapping[str, Value],
        *,
        target: str | None = None,
    ) -> ApplyResult:
        """Write every name in `names` from `desired`.

        Raises:
            BackingStoreUnavailable: No target is active.
            WriteFailed: The store rejected a write; earlier writes stand.
        """
        pending = self.plan(names, desired)
        if not pending:
            return ApplyResult()

        if target is None:
            target = self.store.resolve_active_target()
            if target is None:
                raise BackingStoreUnavailable()

        written: list[str] = []
        for write in pending:
            try:
                ok = self.store.write_value(target, write.name, write.encoded)
            except Exception as e:
                raise WriteFailed(write.name, tuple(written), str(e)) from e
            if not ok:
                raise WriteFailed(write.name, tuple(written))
            logger.debug("Wrote %s=%r to %s", write.name, write.encoded, target)
            written.append(write.name)

        return ApplyResult(written=tuple(written))
