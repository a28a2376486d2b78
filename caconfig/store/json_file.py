"""Registry persisted as a JSON document.

Handy for hosts without the real registry and for rehearsing a change before
applying it to a live authority. The document layout is:

    {
      "active": "Contoso Root CA",
      "targets": {
        "Contoso Root CA": {"CRLPeriodUnits": 1, "AuditFilter": 127}
      }
    }

The file is re-read on every call, so edits made by other tools between
calls are always seen.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from caconfig.store.base import RawValue

logger = logging.getLogger(__name__)


def _stable_json(obj: object) -> str:
    return json.dumps(obj, sort_keys=True, indent=2, ensure_ascii=False)


class JsonFileStore:
    """BackingStore over a JSON registry file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, Any] | None:
        try:
            blob = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug("Registry file %s does not exist", self.path)
            return None
        except json.JSONDecodeError as e:
            raise ValueError(f"Registry file {self.path} is not valid JSON: {e}") from e
        if not isinstance(blob, dict):
            raise ValueError(f"Registry file {self.path} must contain a JSON object")
        return blob

    def resolve_active_target(self) -> str | None:
        blob = self._load()
        if blob is None:
            return None
        active = blob.get("active")
        targets = blob.get("targets", {})
        if not isinstance(active, str) or not isinstance(targets, dict):
            logger.debug("Registry file %s has no active target", self.path)
            return None
        if active not in targets:
            logger.debug("Active target %r is not registered in %s", active, self.path)
            return None
        return active

    def read_value(self, target: str, name: str) -> RawValue:
        blob = self._load() or {}
        values = blob.get("targets", {}).get(target, {})
        return values.get(name)

    def write_value(self, target: str, name: str, raw: str) -> bool:
        blob = self._load()
        if blob is None:
            logger.debug("Cannot write %s: registry file %s is missing", name, self.path)
            return False
        targets = blob.setdefault("targets", {})
        targets.setdefault(target, {})[name] = raw
        self.path.write_text(_stable_json(blob) + "\n", encoding="utf-8")
        logger.debug("Wrote %s=%r for %s", name, raw, target)
        return True
