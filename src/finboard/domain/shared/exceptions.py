"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions should inherit from DomainException
to enable centralized exception handling in the presentation layer.

Every concrete exception belongs to one of four failure kinds:

- not found (EntityNotFoundError)
- upstream unavailable (UpstreamUnavailableError)
- unauthorized (UnauthorizedError)
- invalid (ValidationError)
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE = "INVALID_DATE"
    AGGREGATOR_REQUEST_INVALID = "AGGREGATOR_REQUEST_INVALID"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    BANK_LINK_NOT_FOUND = "BANK_LINK_NOT_FOUND"
    INSTITUTION_NOT_FOUND = "INSTITUTION_NOT_FOUND"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"

    # Authorization Errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    AGGREGATOR_AUTHENTICATION_FAILED = "AGGREGATOR_AUTHENTICATION_FAILED"

    # Upstream Errors (502/503)
    AGGREGATOR_UNAVAILABLE = "AGGREGATOR_UNAVAILABLE"
    AGGREGATOR_RESPONSE_INVALID = "AGGREGATOR_RESPONSE_INVALID"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class FailureKind(str, Enum):
    """Coarse classification of a failure, independent of the error code."""

    NOT_FOUND = "not_found"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UNAUTHORIZED = "unauthorized"
    INVALID = "invalid"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    This exception provides structured error information that can be
    used by the presentation layer to generate consistent API responses.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    kind: FailureKind = FailureKind.INVALID

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    kind = FailureKind.INVALID

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    kind = FailureKind.NOT_FOUND

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UnauthorizedError(DomainException):
    """Raised when the caller or a stored credential is not authorized."""

    kind = FailureKind.UNAUTHORIZED

    def __init__(
        self,
        message: str = "Not authorized",
        code: ErrorCode = ErrorCode.UNAUTHORIZED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UpstreamUnavailableError(DomainException):
    """Raised when an external service cannot be reached or fails."""

    kind = FailureKind.UPSTREAM_UNAVAILABLE

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.AGGREGATOR_UNAVAILABLE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class MissingUserError(UnauthorizedError):
    """Raised when a request carries no identifiable user."""

    def __init__(self, message: str = "No authenticated user") -> None:
        super().__init__(message=message, code=ErrorCode.UNAUTHORIZED)


class InvalidDateError(ValidationError):
    """Raised when a transaction date cannot be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(
            message=f"Unrecognized date value: {value!r}",
            code=ErrorCode.INVALID_DATE,
            details={"value": value},
        )
