"""Pure validation of webhook payloads and status updates."""

from collections.abc import Mapping
from typing import Any

from app.schemas.reports import (
    ReportCreate,
    ReportSeverity,
    ReportSource,
    ReportStatus,
    enum_values,
)
from app.services.errors import InvalidEnumError, InvalidFieldError, MissingFieldError

REQUIRED_INTAKE_FIELDS = ("source", "severity", "title", "summary")

VALID_SOURCES: list[str] = enum_values(ReportSource)
VALID_SEVERITIES: list[str] = enum_values(ReportSeverity)
VALID_STATUSES: list[str] = enum_values(ReportStatus)


def _is_missing(value: Any) -> bool:
    """None, and strings that are empty once stripped, count as missing."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _invalid_enum_message(field: str, allowed: list[str]) -> str:
    return f"Invalid {field}. Must be one of: {', '.join(allowed)}"


def validate_intake_payload(payload: Mapping[str, Any]) -> ReportCreate:
    """
    Validate a decoded webhook payload and return it with enum fields narrowed.

    Checks run in order and stop at the first failure: required fields (reported
    as a group), field types, source domain, severity domain.

    Raises MissingFieldError, InvalidFieldError or InvalidEnumError.
    """
    if any(_is_missing(payload.get(name)) for name in REQUIRED_INTAKE_FIELDS):
        raise MissingFieldError(
            f"Missing required fields: {', '.join(REQUIRED_INTAKE_FIELDS)}"
        )

    for name in REQUIRED_INTAKE_FIELDS:
        if not isinstance(payload[name], str):
            raise InvalidFieldError(f"Field '{name}' must be a string.", field=name)

    source = payload["source"]
    if source not in VALID_SOURCES:
        raise InvalidEnumError(
            _invalid_enum_message("source", VALID_SOURCES),
            field="source",
            allowed=VALID_SOURCES,
        )

    severity = payload["severity"]
    if severity not in VALID_SEVERITIES:
        raise InvalidEnumError(
            _invalid_enum_message("severity", VALID_SEVERITIES),
            field="severity",
            allowed=VALID_SEVERITIES,
        )

    return ReportCreate(
        source=ReportSource(source),
        severity=ReportSeverity(severity),
        title=payload["title"],
        summary=payload["summary"],
        raw_data=payload.get("rawData"),
    )


def validate_status(value: Any) -> ReportStatus:
    """Return the ReportStatus for value; raise InvalidEnumError if absent or unknown."""
    if not isinstance(value, str) or value not in VALID_STATUSES:
        raise InvalidEnumError(
            _invalid_enum_message("status", VALID_STATUSES),
            field="status",
            allowed=VALID_STATUSES,
        )
    return ReportStatus(value)
