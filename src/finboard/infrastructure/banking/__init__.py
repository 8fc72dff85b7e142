"""Transaction providers."""

from finboard.infrastructure.banking.static_transaction_provider import (
    EmptyTransactionProvider,
    StaticTransactionProvider,
)

__all__ = ["EmptyTransactionProvider", "StaticTransactionProvider"]
