"""Stores and restarters the engine can be wired to."""
from __future__ import annotations

from caconfig.store.base import BackingStore, RawValue, RestartOutcome, Restarter
from caconfig.store.json_file import JsonFileStore
from caconfig.store.memory import MemoryStore
from caconfig.store.restart import AdvisoryRestarter, RecordingRestarter

__all__ = [
    "AdvisoryRestarter",
    "BackingStore",
    "JsonFileStore",
    "MemoryStore",
    "RawValue",
    "RecordingRestarter",
    "RestartOutcome",
    "Restarter",
]
