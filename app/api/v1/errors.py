"""Translate report service errors into HTTP exceptions."""

from fastapi import HTTPException, status

from app.services.errors import (
    InvalidPayloadError,
    InvalidStatusError,
    InvalidTransitionError,
    MalformedPayloadError,
    ReportNotFoundError,
    ReportServiceError,
    UnauthorizedError,
)

_STATUS_BY_ERROR: list[tuple[type[ReportServiceError], int]] = [
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (MalformedPayloadError, status.HTTP_400_BAD_REQUEST),
    (InvalidPayloadError, status.HTTP_400_BAD_REQUEST),
    (InvalidStatusError, status.HTTP_400_BAD_REQUEST),
    (ReportNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: ReportServiceError) -> HTTPException:
    """Map a service error to an HTTPException carrying its message."""
    for error_cls, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_cls):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error.message,
    )
