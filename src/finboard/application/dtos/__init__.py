"""Data transfer objects returned by the application layer."""

from finboard.application.dtos.result import (
    QueryFailedError,
    QueryFailure,
    QueryResult,
)

__all__ = ["QueryFailedError", "QueryFailure", "QueryResult"]
