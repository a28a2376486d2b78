"""Typed CLI command payloads.

Each command type represents a distinct user intent. The CLI parses arguments
into these typed objects, which are then dispatched to the appropriate handler.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from caconfig.config.desired import DesiredState
from caconfig.config.engine import EngineConfig


@dataclass(frozen=True, slots=True)
class GetCommand:
    """Request to print the full current configuration."""

    store: Path
    config: EngineConfig


@dataclass(frozen=True, slots=True)
class TestCommand:
    """Request to check a desired state without writing anything."""

    __test__ = False

    store: Path
    config: EngineConfig
    desired: DesiredState


@dataclass(frozen=True, slots=True)
class SetCommand:
    """Request to converge the registry on a desired state."""

    store: Path
    config: EngineConfig
    desired: DesiredState


Command = GetCommand | TestCommand | SetCommand
