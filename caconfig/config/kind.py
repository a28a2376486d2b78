"""Setting kinds: how a value is stored and compared.

Every setting in the schema is one of three kinds, and every phase of the
engine (decode, compare, encode) dispatches on it.
"""
from __future__ import annotations

import enum


class SettingKind(str, enum.Enum):
    """How a setting is stored in the registry.

    SCALAR: A single string or integer, compared exactly
    STRING_LIST: Delimited strings, compared as a set
    FLAG_SET: Integer bitmask of named flags, compared as a set of names
    """

    SCALAR = "scalar"
    STRING_LIST = "string_list"
    FLAG_SET = "flag_set"
