"""Engine configuration: everything the reconciliation engine is built with.

Built once and passed to the reader, comparator, and applier, so no phase
reaches for process-wide state.
"""
from __future__ import annotations

from pydantic import Field

from caconfig.config import Config, NonEmptyStr
from caconfig.config.defaults import (
    LIST_DELIMITER,
    SERVICE_NAME,
    default_schema,
)
from caconfig.config.schema import Schema


class EngineConfig(Config):
    """Schema table plus the storage conventions around it.

    `service_name` is what the restart advisory names.
    """

    table: Schema = Field(default_factory=default_schema)
    list_delimiter: NonEmptyStr = LIST_DELIMITER
    service_name: NonEmptyStr = SERVICE_NAME
