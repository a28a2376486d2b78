"""
resolve provides variable interpolation for schema and desired-state files.
"""
from __future__ import annotations

import json
import re
from collections.abc import Mapping
from pathlib import Path

import yaml


# `${name}` where name is a plain identifier-ish token.
_PLACEHOLDER = re.compile(r"\$\{(\w+)\}")


class Resolver:
    """Expands `${name}` placeholders in a loaded payload from a vars table.

    Variables may refer to other variables. Each one is expanded at most
    once; a chain that comes back to itself is reported with its full path.
    """

    def __init__(self, vars: Mapping[str, object]) -> None:
        self.vars = dict(vars)
        self.expanded: dict[str, object] = {}

    def resolve(self, value: object) -> object:
        """Return `value` with every placeholder replaced."""
        return self._expand(value, ())

    def _expand(self, value: object, chain: tuple[str, ...]) -> object:
        match value:
            case Mapping():
                return {k: self._expand(v, chain) for k, v in value.items()}
            case list():
                return [self._expand(v, chain) for v in value]
            case str():
                return self._substitute(value, chain)
            case _:
                return value

    def _substitute(self, text: str, chain: tuple[str, ...]) -> object:
        # A string that is only a placeholder keeps the variable's type,
        # so `${units}` can stand for an integer or a whole list.
        whole = _PLACEHOLDER.fullmatch(text)
        if whole is not None:
            return self._lookup(whole.group(1), chain)
        return _PLACEHOLDER.sub(
            lambda m: str(self._lookup(m.group(1), chain)), text
        )

    def _lookup(self, name: str, chain: tuple[str, ...]) -> object:
        if name in self.expanded:
            return self.expanded[name]
        if name in chain:
            path = " -> ".join((*chain[chain.index(name):], name))
            raise ValueError(f"Cycle detected in vars: {path}")
        try:
            raw = self.vars[name]
        except KeyError:
            raise ValueError(f"Unknown variable: {name}") from None
        value = self.expanded[name] = self._expand(raw, (*chain, name))
        return value


def load_payload(path: Path) -> dict[str, object]:
    """Read a JSON or YAML file into a dict, applying its `vars` section.

    Shared by every `from_path` loader so schema and desired-state files
    accept the same formats.
    """
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    match p.suffix.lower():
        case ".json":
            payload = json.loads(text)
        case ".yml" | ".yaml":
            payload = yaml.safe_load(text)
        case s:
            raise ValueError(f"Unsupported format '{s}'")

    if payload is None:
        raise ValueError(f"{p} is empty.")
    if not isinstance(payload, dict):
        raise ValueError(f"{p} must contain a dict, got {type(payload)!r}")

    vars_payload = payload.pop("vars", None)
    if vars_payload is not None:
        if not isinstance(vars_payload, dict):
            raise ValueError(f"vars must be a dict, got {type(vars_payload)!r}")
        resolved = Resolver(vars_payload).resolve(payload)
        assert isinstance(resolved, dict)
        payload = resolved

    return payload
