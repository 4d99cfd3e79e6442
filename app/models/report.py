"""ORM model for persisted security reports."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, String, Text

from app.models.base import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(UTC)


class SecurityReport(Base):
    """
    One ingested security finding with its triage status.

    source, severity and status hold the string values of ReportSource,
    ReportSeverity and ReportStatus; values are validated before they get here.
    raw_data is the JSON encoding of the caller's payload ("{}" when omitted).
    """

    __tablename__ = "security_reports"

    id = Column(String(36), primary_key=True, default=_new_id)
    source = Column(String(32), nullable=False, index=True)
    severity = Column(String(32), nullable=False, index=True)
    title = Column(String(512), nullable=False)
    summary = Column(Text, nullable=False)
    raw_data = Column(Text, nullable=False, default="{}")
    status = Column(String(32), nullable=False, default="new", index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
