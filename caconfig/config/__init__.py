"""Configuration system: turning YAML into validated Python objects.

The schema table, the engine settings, and desired states are all plain
YAML (or JSON) files validated into Pydantic models. Validation happens once,
at load time, so a malformed schema stops the process before any registry
value is read or written.
"""
from __future__ import annotations

import enum
from typing import Annotated, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict


T = TypeVar("T")


class ValidationType(enum.Enum):
    """Types of value validation we support."""

    SHOULD_BE_TRUE = "should_be_true"
    SHOULD_BE_POWER_OF_TWO = "should_be_power_of_two"
    SHOULD_BE_UNIQUE = "should_be_unique"


class Config(BaseModel):
    """Base class for all configuration objects.

    Configs are frozen: once loaded they are shared by every phase of the
    engine and must not change underneath it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @staticmethod
    def check(left: T, validation_type: ValidationType) -> T:
        """Validate a value against a constraint, raising ValueError on failure."""
        match validation_type:
            case ValidationType.SHOULD_BE_TRUE:
                if not left:
                    raise ValueError(
                        f"Validation failed: {validation_type.name}: "
                        f"value={left!r} is not truthy"
                    )
                return left
            case ValidationType.SHOULD_BE_POWER_OF_TWO:
                v = int(left)  # type: ignore[call-overload]
                if v <= 0 or v & (v - 1):
                    raise ValueError(
                        f"Validation failed: {validation_type.name}: "
                        f"{left!r} is not a power of two"
                    )
                return left
            case ValidationType.SHOULD_BE_UNIQUE:
                items = list(left)  # type: ignore[call-overload]
                dupes = sorted({str(x) for x in items if items.count(x) > 1})
                if dupes:
                    raise ValueError(
                        f"Validation failed: {validation_type.name}: "
                        f"duplicates {', '.join(dupes)}"
                    )
                return left
            case _:
                raise ValueError(
                    f"Validation failed: unknown validation type {validation_type}"
                )


# Type aliases for validated primitives—use these in config models
FlagBit = Annotated[
    int,
    AfterValidator(lambda v: Config.check(v, ValidationType.SHOULD_BE_POWER_OF_TWO)),
]
NonEmptyStr = Annotated[
    str,
    AfterValidator(lambda v: Config.check(v, ValidationType.SHOULD_BE_TRUE)),
]
