"""Reconciliation engine: read, compare, apply.

Pipeline stages:
1. Read: Decode every schema setting from the backing store
2. Compare: Find desired settings that differ (kind-aware equality)
3. Apply: Validate the whole batch, then write each difference once
"""
from __future__ import annotations

from caconfig.engine.applier import ApplyResult, PendingWrite, StateApplier
from caconfig.engine.codec import Snapshot, Value
from caconfig.engine.comparator import diff, is_converged
from caconfig.engine.reader import StateReader
from caconfig.engine.resource import CertificationAuthoritySettings

__all__ = [
    "ApplyResult",
    "CertificationAuthoritySettings",
    "PendingWrite",
    "Snapshot",
    "StateApplier",
    "StateReader",
    "Value",
    "diff",
    "is_converged",
]
