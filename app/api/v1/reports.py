"""Report endpoints: filtered listing, severity tallies, detail and status triage."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from app.api.v1.errors import to_http_exception
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.schemas.reports import (
    ErrorResponse,
    ReportDetail,
    ReportOut,
    ReportSummary,
)
from app.services.errors import ReportServiceError
from app.services.intake import parse_json_body
from app.services.lifecycle import next_status, update_status
from app.services.query import count_by_severity, decode_raw_data, get_report, list_reports
from app.services.validation import VALID_STATUSES

router = APIRouter()


@router.get("", response_model=list[ReportOut])
def get_reports(
    db: Annotated[Session, Depends(get_db)],
    severity: Annotated[str | None, Query()] = None,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
) -> list[ReportOut]:
    """
    List reports, newest first.

    `severity` and `status` restrict to exact matches; omit either to leave it
    unrestricted. Other query parameters are ignored.
    """
    reports = list_reports(db, {"severity": severity, "status": status_filter})
    return [ReportOut.model_validate(r) for r in reports]


@router.get("/summary", response_model=ReportSummary)
def get_report_summary(
    db: Annotated[Session, Depends(get_db)],
    severity: Annotated[str | None, Query()] = None,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
) -> ReportSummary:
    """Per-severity counts over the same filters as the listing."""
    counts = count_by_severity(db, {"severity": severity, "status": status_filter})
    return ReportSummary(total=sum(counts.values()), by_severity=counts)


@router.get(
    "/{report_id}",
    response_model=ReportDetail,
    responses={404: {"model": ErrorResponse}},
)
def get_report_detail(
    report_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> ReportDetail:
    """Return one report with its decoded raw payload and the next triage step."""
    try:
        report = get_report(db, report_id)
    except ReportServiceError as e:
        raise to_http_exception(e) from e
    base = ReportOut.model_validate(report)
    return ReportDetail(
        **base.model_dump(),
        raw_data_decoded=decode_raw_data(report.raw_data),
        next_status=next_status(report.status),
    )


@router.patch(
    "/{report_id}",
    response_model=ReportOut,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {
                        "type": "object",
                        "required": ["status"],
                        "properties": {
                            "status": {"type": "string", "enum": VALID_STATUSES}
                        },
                    }
                }
            },
        }
    },
)
async def patch_report_status(
    report_id: str,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReportOut:
    """
    Change a report's triage status to `new`, `reviewed` or `resolved`.

    With STRICT_STATUS_TRANSITIONS enabled only the next forward step (or the
    current status) is accepted; other targets return 409.
    """
    body = await request.body()
    try:
        payload = parse_json_body(body)
        report = await run_in_threadpool(
            update_status,
            db,
            report_id,
            payload.get("status"),
            strict=settings.STRICT_STATUS_TRANSITIONS,
        )
    except ReportServiceError as e:
        raise to_http_exception(e) from e
    return ReportOut.model_validate(report)
