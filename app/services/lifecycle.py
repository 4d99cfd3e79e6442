"""Lifecycle service: status updates on existing reports."""

import logging

from sqlalchemy.orm import Session

from app.models import SecurityReport
from app.models.report import utcnow
from app.schemas.reports import ReportStatus
from app.services.errors import (
    InvalidEnumError,
    InvalidStatusError,
    InvalidTransitionError,
    ReportNotFoundError,
)
from app.services.validation import validate_status

logger = logging.getLogger(__name__)

# Forward-only triage flow: each status maps to the statuses it may move to.
STATUS_TRANSITIONS: dict[ReportStatus, frozenset[ReportStatus]] = {
    ReportStatus.NEW: frozenset({ReportStatus.REVIEWED}),
    ReportStatus.REVIEWED: frozenset({ReportStatus.RESOLVED}),
    ReportStatus.RESOLVED: frozenset(),
}

_NEXT_STATUS: dict[ReportStatus, ReportStatus] = {
    ReportStatus.NEW: ReportStatus.REVIEWED,
    ReportStatus.REVIEWED: ReportStatus.RESOLVED,
}


def next_status(current: ReportStatus | str) -> ReportStatus | None:
    """Return the single forward step from current, or None once resolved."""
    return _NEXT_STATUS.get(ReportStatus(current))


def is_allowed_transition(current: ReportStatus | str, requested: ReportStatus | str) -> bool:
    """True if requested equals current or is a direct successor of it."""
    current = ReportStatus(current)
    requested = ReportStatus(requested)
    return requested == current or requested in STATUS_TRANSITIONS[current]


def update_status(
    db: Session,
    report_id: str,
    requested: object,
    *,
    strict: bool = False,
) -> SecurityReport:
    """
    Set a report's status and return the refreshed record.

    The requested value is validated before any lookup. With strict=False any
    member of the closed status set is accepted regardless of the current
    status; with strict=True only staying put or moving one step forward is.

    Raises InvalidStatusError, ReportNotFoundError or InvalidTransitionError.
    """
    try:
        target = validate_status(requested)
    except InvalidEnumError as e:
        raise InvalidStatusError(e.message) from e

    report = (
        db.query(SecurityReport)
        .filter(SecurityReport.id == report_id)
        .with_for_update()
        .first()
    )
    if report is None:
        raise ReportNotFoundError(report_id)

    current = ReportStatus(report.status)
    if strict and not is_allowed_transition(current, target):
        db.rollback()
        raise InvalidTransitionError(
            f"Cannot change status from {current.value} to {target.value}.",
            current=current.value,
            requested=target.value,
        )

    report.status = target.value
    # onupdate only fires when a column value changes; always stamp the mutation.
    report.updated_at = utcnow()
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(report)
    logger.info(
        "Report status updated: id=%s %s -> %s",
        report.id,
        current.value,
        target.value,
    )
    return report
