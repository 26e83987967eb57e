"""
TASKFLOW - Error Taxonomy

Every failure that reaches a client is one of these. The message is
client-safe; internal detail only goes to the log.
"""

from fastapi import status


class AppError(Exception):
    """Base application error mapped to an HTTP status and a JSON error body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class AuthError(AppError):
    """Missing, unknown, malformed or expired session."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"

    UNAUTHENTICATED = "unauthenticated"

    def __init__(self, message: str | None = None, reason: str = UNAUTHENTICATED):
        super().__init__(message)
        self.reason = reason


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class PayloadTooLargeError(AppError):
    status_code = status.HTTP_413_CONTENT_TOO_LARGE
    default_message = "Payload too large"


class InternalError(AppError):
    pass


def describe_validation_error(errors: list) -> str:
    """Turn the first pydantic/FastAPI validation error into a short client message."""
    if not errors:
        return ValidationError.default_message
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON"
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg") or ValidationError.default_message
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{field}: {message}" if field else message
