"""Schema table: how every managed setting is stored.

The schema is the single source of truth for encoding and decoding. Each
descriptor names one registry value and its kind; flag sets also list their
named bits. A schema is validated once when it is built, and any mistake in
it (duplicate names, a bit that is not a power of two, flags on a scalar)
is a configuration error that stops the process.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import model_validator

from caconfig.config import Config, FlagBit, NonEmptyStr, ValidationType
from caconfig.config.kind import SettingKind
from caconfig.config.resolve import load_payload
from caconfig.errors import UnknownSettingName


class FlagDefinition(Config):
    """One named bit of a flag set."""

    name: NonEmptyStr
    bit: FlagBit


class SettingDescriptor(Config):
    """Describes one registry value managed by the engine.

    `flags` is only meaningful for FLAG_SET settings and `choices` only for
    SCALAR settings that accept a fixed vocabulary (e.g. period units).
    """

    name: NonEmptyStr
    kind: SettingKind
    flags: tuple[FlagDefinition, ...] = ()
    choices: tuple[str, ...] | None = None

    @model_validator(mode="after")
    def _check_kind_fields(self) -> "SettingDescriptor":
        if self.kind is SettingKind.FLAG_SET:
            Config.check(self.flags, ValidationType.SHOULD_BE_TRUE)
            Config.check([f.name for f in self.flags], ValidationType.SHOULD_BE_UNIQUE)
            Config.check([f.bit for f in self.flags], ValidationType.SHOULD_BE_UNIQUE)
        elif self.flags:
            raise ValueError(f"{self.name}: flags are only valid on flag_set settings")
        if self.choices is not None and self.kind is not SettingKind.SCALAR:
            raise ValueError(f"{self.name}: choices are only valid on scalar settings")
        return self

    @property
    def flag_bits(self) -> dict[str, int]:
        """Flag name to bit value, in declaration order."""
        return {f.name: f.bit for f in self.flags}

    @property
    def flag_mask(self) -> int:
        """Union of every defined bit (127 for seven flags 1..64)."""
        mask = 0
        for f in self.flags:
            mask |= f.bit
        return mask


class Schema(Config):
    """Ordered, immutable table of setting descriptors."""

    settings: tuple[SettingDescriptor, ...]

    @model_validator(mode="after")
    def _check_unique_names(self) -> "Schema":
        Config.check(self.names, ValidationType.SHOULD_BE_UNIQUE)
        return self

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(d.name for d in self.settings)

    def descriptor(self, name: str) -> SettingDescriptor:
        """Look up a descriptor; unknown names are a defect, not a miss."""
        for d in self.settings:
            if d.name == name:
                return d
        raise UnknownSettingName(name)

    def __contains__(self, name: object) -> bool:
        return any(d.name == name for d in self.settings)

    @classmethod
    def from_path(cls, path: Path) -> "Schema":
        """Load and validate a schema from a JSON or YAML file."""
        return cls.model_validate(load_payload(path))
