"""Built-in schema for the certificate authority's settings.

These are the registry values under the authority's configuration key that
the engine manages out of the box. A deployment can replace the table with
its own schema file (`Schema.from_path`); this one mirrors what the
certificate service itself stores.
"""
from __future__ import annotations

from caconfig.config.kind import SettingKind
from caconfig.config.schema import FlagDefinition, Schema, SettingDescriptor


# Literal backslash + "n": the token certutil uses between list entries.
LIST_DELIMITER = "\\n"

SERVICE_NAME = "CertSvc"

PERIODS = ("Hours", "Days", "Weeks", "Months", "Years")

AUDIT_FLAGS: tuple[tuple[str, int], ...] = (
    ("StartAndStopADCS", 1),
    ("BackupAndRestoreCADatabase", 2),
    ("IssueAndManageCertificateRequests", 4),
    ("RevokeCertificatesAndPublishCRLs", 8),
    ("ChangeCASecuritySettings", 16),
    ("StoreAndRetrieveArchivedKeys", 32),
    ("ChangeCAConfiguration", 64),
)


def _scalar(name: str, choices: tuple[str, ...] | None = None) -> SettingDescriptor:
    return SettingDescriptor(name=name, kind=SettingKind.SCALAR, choices=choices)


def _list(name: str) -> SettingDescriptor:
    return SettingDescriptor(name=name, kind=SettingKind.STRING_LIST)


def default_schema() -> Schema:
    """Return the built-in schema table."""
    return Schema(
        settings=(
            _list("CACertPublicationURLs"),
            _list("CRLPublicationURLs"),
            _scalar("CRLOverlapUnits"),
            _scalar("CRLOverlapPeriod", PERIODS),
            _scalar("CRLPeriodUnits"),
            _scalar("CRLPeriod", PERIODS),
            _scalar("ValidityPeriodUnits"),
            _scalar("ValidityPeriod", PERIODS),
            _scalar("DSConfigDN"),
            _scalar("DSDomainDN"),
            SettingDescriptor(
                name="AuditFilter",
                kind=SettingKind.FLAG_SET,
                flags=tuple(FlagDefinition(name=n, bit=b) for n, b in AUDIT_FLAGS),
            ),
        )
    )
