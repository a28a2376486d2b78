"""
reader_test provides tests for StateReader.
"""
from __future__ import annotations

import unittest

from caconfig.config.engine import EngineConfig
from caconfig.engine.reader import StateReader
from caconfig.errors import BackingStoreUnavailable, InvalidFlagValue
from caconfig.store.memory import MemoryStore


class TestStateReader(unittest.TestCase):
    """Tests for reading and decoding the current snapshot."""

    def setUp(self) -> None:
        self.config = EngineConfig()

    def test_snapshot_has_every_setting(self) -> None:
        store = MemoryStore({"CA": {"CRLPeriodUnits": 1}}, active="CA")
        snapshot = StateReader(self.config, store).read_current()
        self.assertEqual(list(snapshot), list(self.config.table.names))
        self.assertEqual(snapshot["CRLPeriodUnits"], 1)
        self.assertIsNone(snapshot["DSConfigDN"])
        self.assertEqual(snapshot["CRLPublicationURLs"], [])
        self.assertEqual(snapshot["AuditFilter"], frozenset())

    def test_decodes_by_kind(self) -> None:
        store = MemoryStore(
            {"CA": {"CACertPublicationURLs": "x\\ny", "AuditFilter": 3}},
            active="CA",
        )
        snapshot = StateReader(self.config, store).read_current()
        self.assertEqual(snapshot["CACertPublicationURLs"], ["x", "y"])
        self.assertEqual(
            snapshot["AuditFilter"],
            frozenset({"StartAndStopADCS", "BackupAndRestoreCADatabase"}),
        )

    def test_reads_only_the_active_target(self) -> None:
        store = MemoryStore(
            {"Old": {"CRLPeriodUnits": 9}, "New": {"CRLPeriodUnits": 1}},
            active="New",
        )
        self.assertEqual(StateReader(self.config, store).read_current()["CRLPeriodUnits"], 1)

    def test_no_active_target(self) -> None:
        store = MemoryStore({"CA": {}}, active=None)
        with self.assertRaises(BackingStoreUnavailable):
            StateReader(self.config, store).read_current()

    def test_active_target_not_registered(self) -> None:
        store = MemoryStore({"CA": {}}, active="Other")
        with self.assertRaises(BackingStoreUnavailable):
            StateReader(self.config, store).read_current()

    def test_invalid_stored_bitmask(self) -> None:
        store = MemoryStore({"CA": {"AuditFilter": 255}}, active="CA")
        with self.assertRaises(InvalidFlagValue):
            StateReader(self.config, store).read_current()


if __name__ == "__main__":
    unittest.main()
