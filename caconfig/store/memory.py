"""In-memory registry, used by tests and dry runs."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from caconfig.store.base import RawValue

logger = logging.getLogger(__name__)


class MemoryStore:
    """Dict-backed registry holding any number of targets.

    `reject` lists setting names whose writes fail, to exercise partial
    batches. Every successful write is appended to `writes`.
    """

    def __init__(
        self,
        targets: Mapping[str, Mapping[str, RawValue]] | None = None,
        *,
        active: str | None = None,
        reject: Iterable[str] = (),
    ) -> None:
        self.targets: dict[str, dict[str, RawValue]] = {
            name: dict(values) for name, values in (targets or {}).items()
        }
        self.active = active
        self.reject = set(reject)
        self.writes: list[tuple[str, str, str]] = []

    def resolve_active_target(self) -> str | None:
        if self.active is None or self.active not in self.targets:
            return None
        return self.active

    def read_value(self, target: str, name: str) -> RawValue:
        return self.targets.get(target, {}).get(name)

    def write_value(self, target: str, name: str, raw: str) -> bool:
        if name in self.reject:
            logger.debug("Rejecting write of %s on %s", name, target)
            return False
        self.targets.setdefault(target, {})[name] = raw
        self.writes.append((target, name, raw))
        return True
