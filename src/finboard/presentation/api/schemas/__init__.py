"""Pydantic schemas for API response models."""

from finboard.presentation.api.schemas.banking import (
    BankAccountDetailResponse,
    BankAccountListResponse,
    BankAccountResponse,
    ExternalTransactionResponse,
    InstitutionResponse,
    LinkFailureResponse,
    TransactionListResponse,
    TransactionResponse,
)

__all__ = [
    "BankAccountDetailResponse",
    "BankAccountListResponse",
    "BankAccountResponse",
    "ExternalTransactionResponse",
    "InstitutionResponse",
    "LinkFailureResponse",
    "TransactionListResponse",
    "TransactionResponse",
]
