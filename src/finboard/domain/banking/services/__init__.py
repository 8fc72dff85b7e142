"""Domain services for the banking domain."""

from finboard.domain.banking.services.transaction_merge_service import (
    TransactionMergeService,
)

__all__ = ["TransactionMergeService"]
