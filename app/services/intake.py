"""Intake service: authenticate a webhook caller, validate its payload, persist one report."""

import json
import logging
from typing import Any

from pydantic import SecretStr
from sqlalchemy.orm import Session

from app.core.security import verify_webhook_key
from app.models import SecurityReport
from app.schemas.reports import ReportCreate, ReportStatus
from app.services.errors import (
    InvalidPayloadError,
    MalformedPayloadError,
    UnauthorizedError,
)
from app.services.validation import validate_intake_payload

logger = logging.getLogger(__name__)

EMPTY_RAW_DATA = "{}"


def encode_raw_data(raw_data: Any) -> str:
    """JSON-encode the caller's rawData; absent or null becomes an empty object."""
    if raw_data is None:
        return EMPTY_RAW_DATA
    return json.dumps(raw_data, ensure_ascii=False, allow_nan=False)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"Non-JSON constant {name}")


def parse_json_body(body: bytes) -> dict[str, Any]:
    """
    Decode a request body into a JSON object.

    Raises MalformedPayloadError if the bytes are not strict JSON or hold text
    that cannot be stored as UTF-8 (unpaired surrogate escapes),
    InvalidPayloadError if the JSON value is not an object.
    """
    try:
        data = json.loads(body, parse_constant=_reject_constant)
        # Must re-encode as strict UTF-8 JSON; catches lone surrogates and 1e999 overflow.
        json.dumps(data, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except ValueError as e:
        raise MalformedPayloadError() from e
    if not isinstance(data, dict):
        raise InvalidPayloadError("JSON body must be an object.")
    return data


class IntakeService:
    """Creates reports from authenticated webhook calls.

    The shared secret is fixed at construction; a missing secret rejects every call.
    """

    def __init__(self, webhook_api_key: SecretStr | str | None) -> None:
        self._webhook_api_key = webhook_api_key

    @property
    def configured(self) -> bool:
        """True when a non-blank secret was supplied."""
        key = self._webhook_api_key
        if isinstance(key, SecretStr):
            key = key.get_secret_value()
        return bool(key and key.strip())

    @property
    def api_key(self) -> str | None:
        """Configured secret in plain form, for the test-trigger proxy."""
        if not self.configured:
            return None
        key = self._webhook_api_key
        return key.get_secret_value() if isinstance(key, SecretStr) else key

    def authorize(self, credential: str | None) -> None:
        """Raise UnauthorizedError unless credential matches the configured secret."""
        if not verify_webhook_key(credential, self._webhook_api_key):
            if not self.configured:
                logger.warning("Webhook rejected: WEBHOOK_API_KEY is not configured")
            else:
                logger.warning("Webhook rejected: missing or invalid API key")
            raise UnauthorizedError()

    def ingest(self, db: Session, credential: str | None, body: bytes) -> str:
        """
        Authenticate, parse, validate and persist one report; return its id.

        Authorization is checked before the body is parsed. Nothing is written
        unless every check passes.
        """
        self.authorize(credential)
        payload = parse_json_body(body)
        report_in = validate_intake_payload(payload)
        return self.create_report(db, report_in)

    def create_report(self, db: Session, report_in: ReportCreate) -> str:
        """Persist a validated report with status 'new' and return its id."""
        row = SecurityReport(
            source=report_in.source.value,
            severity=report_in.severity.value,
            title=report_in.title,
            summary=report_in.summary,
            raw_data=encode_raw_data(report_in.raw_data),
            status=ReportStatus.NEW.value,
        )
        db.add(row)
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(row)
        logger.info(
            "Report created: id=%s source=%s severity=%s",
            row.id,
            row.source,
            row.severity,
        )
        return row.id
