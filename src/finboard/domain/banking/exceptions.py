"""Banking domain exceptions.

This module defines exceptions specific to the banking bounded context:
missing bank links, institution lookups and failures of the aggregation
API that provides live account data.

Aggregator errors typically map to 401/502/503 HTTP responses.
"""

from finboard.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    UnauthorizedError,
    UpstreamUnavailableError,
    ValidationError,
)

# =============================================================================
# Not Found
# =============================================================================


class BankLinkNotFoundError(EntityNotFoundError):
    """Raised when a stored bank link does not exist."""

    def __init__(self, link_id: str) -> None:
        super().__init__(
            message=f"Bank link '{link_id}' not found",
            code=ErrorCode.BANK_LINK_NOT_FOUND,
            details={"link_id": link_id},
        )


class InstitutionNotFoundError(EntityNotFoundError):
    """Raised when the aggregator knows no institution with the given id."""

    def __init__(self, institution_id: str) -> None:
        super().__init__(
            message=f"Institution '{institution_id}' not found",
            code=ErrorCode.INSTITUTION_NOT_FOUND,
            details={"institution_id": institution_id},
        )


class AggregatorAccountNotFoundError(EntityNotFoundError):
    """Raised when the aggregator returns no account for a linked item.

    This is different from BankLinkNotFoundError - the local link exists
    but the item behind it exposes no accounts.
    """

    def __init__(self, link_id: str | None = None) -> None:
        msg = (
            f"No account available for bank link '{link_id}'"
            if link_id
            else "No account available"
        )
        super().__init__(
            message=msg,
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={"link_id": link_id} if link_id else None,
        )


# =============================================================================
# Aggregator Exceptions
# =============================================================================


class AggregatorUnavailableError(UpstreamUnavailableError):
    """Raised when the aggregation API cannot be reached or fails on its side."""

    def __init__(
        self,
        message: str = "Aggregation service is unavailable",
        status_code: int | None = None,
        error_code: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.AGGREGATOR_UNAVAILABLE,
            details={"status_code": status_code, "error_code": error_code},
        )


class AggregatorAuthenticationError(UnauthorizedError):
    """Raised when the aggregator rejects the access token or API keys.

    Typically an expired item login or revoked access token; the user has
    to re-link the bank.
    """

    def __init__(
        self,
        message: str = "Aggregator rejected the credentials",
        error_code: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.AGGREGATOR_AUTHENTICATION_FAILED,
            details={"error_code": error_code} if error_code else None,
        )


class AggregatorRequestError(ValidationError):
    """Raised when the aggregator rejects a request as invalid."""

    def __init__(
        self,
        message: str = "Aggregator rejected the request",
        error_code: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.AGGREGATOR_REQUEST_INVALID,
            details={"error_code": error_code} if error_code else None,
        )


class InvalidAggregatorResponseError(ValidationError):
    """Raised when an aggregator response cannot be mapped to the domain."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Unexpected aggregator response: {reason}",
            code=ErrorCode.AGGREGATOR_RESPONSE_INVALID,
            details={"reason": reason},
        )
