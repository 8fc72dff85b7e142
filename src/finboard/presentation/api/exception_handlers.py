"""Centralized exception handlers for the FastAPI application.

Domain exceptions (including failed query results that were unwrapped) are
mapped to HTTP responses with a consistent error format:

    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from finboard.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    FailureKind,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AGGREGATOR_REQUEST_INVALID: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.AGGREGATOR_AUTHENTICATION_FAILED: status.HTTP_401_UNAUTHORIZED,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BANK_LINK_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INSTITUTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 502 Bad Gateway - upstream answered with garbage
    ErrorCode.AGGREGATOR_RESPONSE_INVALID: status.HTTP_502_BAD_GATEWAY,
    # 503 Service Unavailable
    ErrorCode.AGGREGATOR_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

KIND_TO_STATUS: dict[FailureKind, int] = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    FailureKind.UPSTREAM_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    FailureKind.INVALID: status.HTTP_400_BAD_REQUEST,
}


def get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on the failure kind.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    return KIND_TO_STATUS.get(exc.kind, status.HTTP_400_BAD_REQUEST)


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = get_status_for_exception(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Domain error on %s %s: %r",
                request.method,
                request.url.path,
                exc,
            )
        else:
            logger.info(
                "Domain error on %s %s: [%s] %s",
                request.method,
                request.url.path,
                exc.code.value,
                exc.message,
            )

        return _create_error_response(status_code, exc.message, exc.code.value)
