"""Pydantic request/response schemas."""

from app.schemas.health import HealthResponse
from app.schemas.reports import (
    ErrorResponse,
    IngestResponse,
    ReportCreate,
    ReportDetail,
    ReportOut,
    ReportSeverity,
    ReportSource,
    ReportStatus,
    ReportSummary,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "IngestResponse",
    "ReportCreate",
    "ReportDetail",
    "ReportOut",
    "ReportSeverity",
    "ReportSource",
    "ReportStatus",
    "ReportSummary",
]
