"""Kind-specific decode, encode, and equality.

Every phase of the engine goes through these four functions, which switch on
the descriptor's kind. Decoding turns a raw registry value into the value
callers see; encoding is its inverse and produces the string handed to the
store; equality decides whether a desired value is already met.

Value shapes:
- SCALAR: str or int as stored (None when the store holds nothing)
- STRING_LIST: list[str]
- FLAG_SET: frozenset[str] of flag names
"""
from __future__ import annotations

from collections.abc import Iterable

from caconfig.config.kind import SettingKind
from caconfig.config.schema import SettingDescriptor
from caconfig.errors import InvalidFlagValue, UnknownFlagName
from caconfig.store.base import RawValue


Value = str | int | list[str] | frozenset[str] | None
Snapshot = dict[str, Value]


def decode(descriptor: SettingDescriptor, raw: RawValue, delimiter: str) -> Value:
    """Decode a raw registry value."""
    match descriptor.kind:
        case SettingKind.SCALAR:
            return raw
        case SettingKind.STRING_LIST:
            return _decode_list(raw, delimiter)
        case SettingKind.FLAG_SET:
            return _decode_flags(descriptor, raw)


def encode(descriptor: SettingDescriptor, value: Value, delimiter: str) -> str:
    """Encode a decoded value into its registry string.

    Raises:
        UnknownFlagName: A flag set names a flag the descriptor lacks.
        ValueError: The value has no storage representation (None).
    """
    if value is None:
        raise ValueError(f"{descriptor.name}: cannot write an empty value")
    match descriptor.kind:
        case SettingKind.SCALAR:
            return str(value)
        case SettingKind.STRING_LIST:
            return delimiter.join(_as_strings(descriptor, value))
        case SettingKind.FLAG_SET:
            return str(_encode_flags(descriptor, value))


def equal(descriptor: SettingDescriptor, current: Value, desired: Value) -> bool:
    """Kind-aware equality between a current and a desired value."""
    match descriptor.kind:
        case SettingKind.SCALAR:
            # Compare as stored: a written 5 reads back as "5".
            return _scalar_text(current) == _scalar_text(desired)
        case SettingKind.STRING_LIST:
            left = set(_as_strings(descriptor, current or [])) - {""}
            right = set(_as_strings(descriptor, desired or [])) - {""}
            return not left ^ right
        case SettingKind.FLAG_SET:
            return frozenset(current or ()) == frozenset(desired or ())


def normalize(descriptor: SettingDescriptor, value: object) -> Value:
    """Coerce a caller-supplied desired value into its decoded shape.

    A bare string stands for a one-element list or flag set, and an integer
    flag value is read as a bitmask. Flag names are not checked here; unknown
    names are reported when the value is encoded for writing.
    """
    if value is None:
        raise ValueError(
            f"{descriptor.name}: null is not a desired value; omit the setting instead"
        )
    match descriptor.kind:
        case SettingKind.SCALAR:
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise ValueError(
                    f"{descriptor.name}: expected a string or integer, got {type(value).__name__}"
                )
            if descriptor.choices is not None and str(value) not in descriptor.choices:
                raise ValueError(
                    f"{descriptor.name}: {value!r} is not one of {', '.join(descriptor.choices)}"
                )
            return value
        case SettingKind.STRING_LIST:
            if isinstance(value, str):
                value = [value]
            # Empty entries do not survive a write; "" clears the list.
            return [item for item in _as_strings(descriptor, value) if item]
        case SettingKind.FLAG_SET:
            if isinstance(value, str):
                return frozenset((value,))
            if isinstance(value, int) and not isinstance(value, bool):
                return _decode_flags(descriptor, value)
            return frozenset(_as_strings(descriptor, value))
    raise ValueError(f"{descriptor.name}: unsupported kind {descriptor.kind!r}")


def _scalar_text(value: Value) -> str | None:
    return None if value is None else str(value)


def _as_strings(descriptor: SettingDescriptor, value: object) -> list[str]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ValueError(
            f"{descriptor.name}: expected a list of strings, got {type(value).__name__}"
        )
    items = list(value)
    for item in items:
        if not isinstance(item, str):
            raise ValueError(
                f"{descriptor.name}: list entries must be strings, got {item!r}"
            )
    return items


def _decode_list(raw: RawValue, delimiter: str) -> list[str]:
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        return [str(item) for item in raw if item != ""]
    return [item for item in str(raw).split(delimiter) if item]


def _decode_flags(descriptor: SettingDescriptor, raw: RawValue) -> frozenset[str]:
    if raw is None or raw == "":
        return frozenset()
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise InvalidFlagValue(descriptor.name, raw, descriptor.flag_mask)
    if isinstance(raw, int):
        mask = raw
    else:
        text = raw.strip()
        try:
            mask = int(text, 16) if text.lower().startswith("0x") else int(text)
        except ValueError:
            raise InvalidFlagValue(descriptor.name, raw, descriptor.flag_mask) from None

    if mask < 0 or mask & ~descriptor.flag_mask:
        raise InvalidFlagValue(descriptor.name, raw, descriptor.flag_mask)
    return frozenset(name for name, bit in descriptor.flag_bits.items() if mask & bit)


def _encode_flags(descriptor: SettingDescriptor, value: Value) -> int:
    names = set(_as_strings(descriptor, value))
    bits = descriptor.flag_bits
    unknown = sorted(n for n in names if n not in bits)
    if unknown:
        raise UnknownFlagName(descriptor.name, unknown)
    mask = 0
    for name in names:
        mask |= bits[name]
    return mask
