"""Error types raised by the events core and mapped to HTTP responses."""

from typing import Optional


class EventsServiceError(Exception):
    """Base error carrying the HTTP status and the client-facing message."""

    status_code: int = 500

    def __init__(self, message: str, error: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def to_payload(self) -> dict:
        """Build the JSON error body."""
        payload = {"message": self.message}
        if self.error is not None:
            payload["error"] = self.error
        return payload


class ValidationError(EventsServiceError):
    """Malformed or missing input, including bad ids and categories."""

    status_code = 400


class AuthMissingError(EventsServiceError):
    status_code = 401


class AuthInvalidError(EventsServiceError):
    status_code = 401


class PermissionDeniedError(EventsServiceError):
    status_code = 403


class NotFoundError(EventsServiceError):
    status_code = 404


class InternalError(EventsServiceError):
    """Unexpected failure; `error` holds the underlying detail."""

    status_code = 500
