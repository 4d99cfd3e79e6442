"""Pydantic schemas and closed enumerations for security reports."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ReportSource(str, Enum):
    """System or class of check that produced a report."""

    GITHUB_ADVISORY = "github-advisory"
    SSL_CHECK = "ssl-check"
    NPM_AUDIT = "npm-audit"


class ReportSeverity(str, Enum):
    """Urgency rating fixed at intake."""

    CRITICAL = "critical"
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"
    INFO = "info"


class ReportStatus(str, Enum):
    """Triage state; intended to move forward new -> reviewed -> resolved."""

    NEW = "new"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Wire values of an enum in declaration order."""
    return [member.value for member in enum_cls]


class _CamelModel(BaseModel):
    """Base for wire models: snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ReportCreate(_CamelModel):
    """Validated intake payload; enum fields are already narrowed."""

    source: ReportSource
    severity: ReportSeverity
    title: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
    raw_data: Any = Field(
        default=None,
        description="Caller-supplied structured payload; stored JSON-encoded.",
    )


class IngestResponse(BaseModel):
    """Response body for a successful webhook intake."""

    success: bool = True
    id: str = Field(..., min_length=1, description="Identifier of the created report.")


class ReportOut(_CamelModel):
    """Full stored record as returned by list, detail and update endpoints."""

    id: str
    source: ReportSource
    severity: ReportSeverity
    title: str
    summary: str
    raw_data: str = Field(..., description="JSON encoding of the original payload.")
    status: ReportStatus
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive values; they were written as UTC.
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)


class ReportDetail(ReportOut):
    """Single report with the decoded payload and the next triage step."""

    raw_data_decoded: Any = Field(
        default=None,
        description="rawData decoded as JSON, or the raw string when it does not decode.",
    )
    next_status: ReportStatus | None = Field(
        default=None,
        description="Next forward status, or null once resolved.",
    )


class ReportSummary(_CamelModel):
    """Per-severity tallies over the filtered report set."""

    total: int = Field(..., ge=0)
    by_severity: dict[str, int] = Field(
        default_factory=dict,
        description="Severity value -> number of matching reports (every severity present).",
    )


class ErrorResponse(BaseModel):
    """Error body returned for every 4xx/5xx response."""

    error: str
