"""Repository interfaces for banking domain."""

from finboard.domain.banking.repositories.bank_link_repository import (
    BankLinkRepository,
)
from finboard.domain.banking.repositories.transfer_transaction_repository import (
    TransferTransactionRepository,
)

__all__ = ["BankLinkRepository", "TransferTransactionRepository"]
