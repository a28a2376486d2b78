"""
comparator decides which desired settings are not yet met.
"""
from __future__ import annotations

from collections.abc import Mapping

from caconfig.config.schema import Schema
from caconfig.engine.codec import Snapshot, equal, normalize


def normalize_desired(schema: Schema, desired: Mapping[str, object]) -> Snapshot:
    """
    normalize_desired coerces every desired value into its decoded shape.

    Raises UnknownSettingName for names outside the schema.
    """
    return {
        name: normalize(schema.descriptor(name), value)
        for name, value in desired.items()
    }


def diff(schema: Schema, current: Snapshot, desired: Mapping[str, object]) -> set[str]:
    """
    diff returns the desired names whose value differs from the current one.

    Settings missing from `desired` are not asserted and never appear in
    the result. This function has no side effects.
    """
    names: set[str] = set()
    for name, value in normalize_desired(schema, desired).items():
        descriptor = schema.descriptor(name)
        if not equal(descriptor, current.get(name), value):
            names.add(name)
    return names


def is_converged(schema: Schema, current: Snapshot, desired: Mapping[str, object]) -> bool:
    """
    is_converged is true when every desired setting is already met.
    """
    return not diff(schema, current, desired)
