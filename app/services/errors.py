"""Errors raised by the report services; routers map them to HTTP status codes."""


class ReportServiceError(Exception):
    """Base for report intake, lifecycle and query failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnauthorizedError(ReportServiceError):
    """Webhook credential missing, wrong, or no secret configured."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class MalformedPayloadError(ReportServiceError):
    """Request body could not be parsed as JSON."""

    def __init__(self, message: str = "Invalid JSON") -> None:
        super().__init__(message)


class InvalidPayloadError(ReportServiceError):
    """Parsed payload failed semantic validation."""


class MissingFieldError(InvalidPayloadError):
    """One or more required fields are absent or empty."""


class InvalidFieldError(InvalidPayloadError):
    """A field is present but has the wrong type."""

    def __init__(self, message: str, field: str) -> None:
        self.field = field
        super().__init__(message)


class InvalidEnumError(InvalidPayloadError):
    """A value lies outside its closed enumeration."""

    def __init__(self, message: str, field: str, allowed: list[str]) -> None:
        self.field = field
        self.allowed = allowed
        super().__init__(message)


class InvalidStatusError(ReportServiceError):
    """Requested status is absent or not one of new, reviewed, resolved."""


class InvalidTransitionError(ReportServiceError):
    """Requested status is not reachable from the current one (strict mode only)."""

    def __init__(self, message: str, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(message)


class ReportNotFoundError(ReportServiceError):
    """No report exists with the given identifier."""

    def __init__(self, report_id: str, message: str = "Not found") -> None:
        self.report_id = report_id
        super().__init__(message)
