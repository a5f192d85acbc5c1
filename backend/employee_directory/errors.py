"""Error taxonomy shared by the services and the HTTP layer.

Services raise these; ``main`` registers a single handler that renders them,
so no layer has to inspect exception messages to decide on a status code.
"""
from __future__ import annotations

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError

# Driver-level connection failures (refused, unresolvable host) reach callers
# as OSError without being wrapped by SQLAlchemy.
STORE_FAILURES = (SQLAlchemyError, OSError)


def store_failure_details(exc: BaseException) -> str:
    """Underlying driver message for a store failure."""

    return str(getattr(exc, "orig", None) or exc)


class EmployeeDirectoryError(Exception):
    """Base class for every failure the service reports to callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}


class ValidationFailure(EmployeeDirectoryError):
    """A request was rejected before anything was persisted."""

    status_code = status.HTTP_400_BAD_REQUEST


class MissingField(ValidationFailure):
    default_message = "All fields are required"


class InvalidIdFormat(ValidationFailure):
    default_message = "Invalid Employee ID format"


class InvalidEmailFormat(ValidationFailure):
    default_message = "Invalid email format"


class InvalidPhoneFormat(ValidationFailure):
    default_message = "Phone number must be 10 digits"


class UnsupportedMediaType(ValidationFailure):
    default_message = "Only JPEG or PNG images are allowed"


class PayloadTooLarge(ValidationFailure):
    default_message = "File too large"


class NotFound(EmployeeDirectoryError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Employee not found"


class StoreError(EmployeeDirectoryError):
    """The underlying store (database or upload directory) failed."""

    def __init__(self, details: str, message: str = "Server error") -> None:
        super().__init__(message)
        self.details = details

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message, "details": self.details}


class SchemaInitError(EmployeeDirectoryError):
    """Fatal: the schema could not be brought up to date at startup."""


def store_error(exc: BaseException) -> StoreError:
    """Wrap one of ``STORE_FAILURES`` for the HTTP layer."""

    return StoreError(store_failure_details(exc))
