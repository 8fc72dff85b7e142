"""Typed result envelope for read queries.

Queries never return a bare ``None`` on failure. They return a QueryResult
that either carries the value or a QueryFailure describing what went wrong,
so callers can tell "no accounts" apart from "fetch failed".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from finboard.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    FailureKind,
)

T = TypeVar("T")


@dataclass(frozen=True)
class QueryFailure:
    """Why a query produced no value."""

    kind: FailureKind
    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: DomainException) -> QueryFailure:
        return cls(
            kind=exc.kind,
            code=exc.code,
            message=exc.message,
            details=dict(exc.details),
        )

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "code": self.code.value,
            "message": self.message,
        }


class QueryFailedError(DomainException):
    """Raised by QueryResult.unwrap() when the query failed."""

    def __init__(self, failure: QueryFailure) -> None:
        super().__init__(
            message=failure.message,
            code=failure.code,
            details=failure.details,
        )
        self.kind = failure.kind
        self.failure = failure


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Either a value or a failure, never both."""

    value: T | None = None
    failure: QueryFailure | None = None

    def __post_init__(self) -> None:
        if self.failure is not None and self.value is not None:
            msg = "QueryResult cannot carry both a value and a failure"
            raise ValueError(msg)

    @classmethod
    def success(cls, value: T) -> QueryResult[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, exc: DomainException) -> QueryResult[T]:
        return cls(failure=QueryFailure.from_exception(exc))

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        """Return the value or raise QueryFailedError."""
        if self.failure is not None:
            raise QueryFailedError(self.failure)
        return self.value  # type: ignore[return-value]
