"""Shared domain building blocks."""

from finboard.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    FailureKind,
    InvalidDateError,
    MissingUserError,
    UnauthorizedError,
    UpstreamUnavailableError,
    ValidationError,
)
from finboard.domain.shared.time import (
    ensure_tz_aware,
    parse_transaction_date,
    utc_now,
)

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "FailureKind",
    "InvalidDateError",
    "MissingUserError",
    "UnauthorizedError",
    "UpstreamUnavailableError",
    "ValidationError",
    "ensure_tz_aware",
    "parse_transaction_date",
    "utc_now",
]
