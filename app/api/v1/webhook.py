"""Webhook endpoints: authenticated report intake and a test trigger that proxies to it."""

import logging
from functools import lru_cache
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.v1.errors import to_http_exception
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.security import WEBHOOK_API_KEY_HEADER
from app.schemas.reports import ErrorResponse, IngestResponse
from app.services.errors import ReportServiceError
from app.services.intake import IntakeService

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache
def get_intake_service() -> IntakeService:
    """Build the intake service once from the configured webhook secret."""
    return IntakeService(get_settings().WEBHOOK_API_KEY)


@router.post(
    "/security-report",
    response_model=IngestResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def ingest_security_report(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    intake: Annotated[IntakeService, Depends(get_intake_service)],
    api_key: Annotated[str | None, Header(alias=WEBHOOK_API_KEY_HEADER)] = None,
) -> IngestResponse:
    """
    Receive one security finding from an external system.

    Requires the shared secret in the `x-api-key` header. The JSON body must
    carry `source` (github-advisory, ssl-check, npm-audit), `severity`
    (critical, high, moderate, low, info), `title` and `summary`; `rawData` is
    optional and stored JSON-encoded. New reports always start as `new`.
    """
    body = await request.body()
    try:
        # Blocking store work stays off the event loop.
        report_id = await run_in_threadpool(intake.ingest, db, api_key, body)
    except ReportServiceError as e:
        raise to_http_exception(e) from e
    return IngestResponse(success=True, id=report_id)


@router.post(
    "/test",
    responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def trigger_test_report(
    request: Request,
    intake: Annotated[IntakeService, Depends(get_intake_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """
    Forward the JSON body to the intake endpoint using the server's own API key.

    Lets operators try the webhook without handing out the secret. The
    downstream status code and body are returned unchanged.
    """
    api_key = intake.api_key
    if api_key is None:
        raise HTTPException(status_code=500, detail="WEBHOOK_API_KEY is not configured")

    body = await request.body()
    url = str(request.url_for("ingest_security_report"))
    transport = httpx.ASGITransport(app=request.app)
    try:
        async with httpx.AsyncClient(
            transport=transport,
            timeout=settings.WEBHOOK_TEST_TIMEOUT_SEC,
        ) as client:
            resp = await client.post(
                url,
                content=body,
                headers={
                    "Content-Type": "application/json",
                    WEBHOOK_API_KEY_HEADER: api_key,
                },
            )
    except httpx.HTTPError as e:
        logger.error("Test webhook forwarding failed: %s", e)
        raise HTTPException(
            status_code=502,
            detail=f"Forwarding to intake endpoint failed: {e!s}",
        ) from e

    try:
        data = resp.json()
    except ValueError:
        data = {"error": resp.text}
    return JSONResponse(content=data, status_code=resp.status_code)
