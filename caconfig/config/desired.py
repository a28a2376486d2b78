"""Desired state: the settings a caller wants to assert.

A desired state is partial on purpose. Only the settings listed are
compared or written; anything left out is simply not managed, never "set to
empty". Files look like:

    vars:
      units: 1
    settings:
      CRLPeriodUnits: '${units}'
      CRLPeriod: Weeks
      AuditFilter: [StartAndStopADCS, ChangeCAConfiguration]
"""
from __future__ import annotations

from pathlib import Path

from pydantic import Field

from caconfig.config import Config
from caconfig.config.resolve import load_payload


DesiredValue = str | int | list[str]


class DesiredState(Config):
    """A partial snapshot loaded from YAML or JSON."""

    settings: dict[str, DesiredValue] = Field(default_factory=dict)

    @classmethod
    def from_path(cls, path: Path) -> "DesiredState":
        """Load and validate a desired state file.

        Supports variable substitution via a `vars` section at the top level.
        """
        return cls.model_validate(load_payload(path))
