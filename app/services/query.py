"""Query service: filtered listing, lookup and tallies of stored reports."""

import json
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from app.models import SecurityReport
from app.schemas.reports import ReportSeverity
from app.services.errors import ReportNotFoundError

# Filter keys honoured by list_reports; anything else is ignored.
FILTERABLE_FIELDS = ("severity", "status")


def _apply_filters(query: Query, filters: Mapping[str, Any] | None) -> Query:
    """Add an equality condition for each recognised, non-empty filter."""
    if not filters:
        return query
    for name in FILTERABLE_FIELDS:
        value = filters.get(name)
        if value is None or value == "":
            continue
        if hasattr(value, "value"):
            value = value.value
        query = query.filter(getattr(SecurityReport, name) == value)
    return query


def list_reports(
    db: Session,
    filters: Mapping[str, Any] | None = None,
) -> list[SecurityReport]:
    """
    Return reports matching the exact-match filters, newest first.

    Values outside the enumerations are passed through and match nothing.
    """
    query = _apply_filters(db.query(SecurityReport), filters)
    return query.order_by(SecurityReport.created_at.desc()).all()


def get_report(db: Session, report_id: str) -> SecurityReport:
    """Return the report with report_id or raise ReportNotFoundError."""
    report = db.get(SecurityReport, report_id)
    if report is None:
        raise ReportNotFoundError(report_id)
    return report


def count_by_severity(
    db: Session,
    filters: Mapping[str, Any] | None = None,
) -> dict[str, int]:
    """Count matching reports per severity; every severity is present, zero if none."""
    query = _apply_filters(
        db.query(SecurityReport.severity, func.count(SecurityReport.id)),
        filters,
    )
    rows = query.group_by(SecurityReport.severity).all()
    counts = {severity.value: 0 for severity in ReportSeverity}
    for severity, count in rows:
        if severity in counts:
            counts[severity] = count
    return counts


def decode_raw_data(raw: str | None) -> Any:
    """Decode a stored rawData string; fall back to the raw string when it is not JSON."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return raw
