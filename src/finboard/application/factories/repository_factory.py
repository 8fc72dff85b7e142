"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from finboard.domain.banking.repositories import (
    BankLinkRepository,
    TransferTransactionRepository,
)


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        """
        ...

    def bank_link_repository(self) -> BankLinkRepository:
        """Get bank link repository."""
        ...

    def transfer_transaction_repository(self) -> TransferTransactionRepository:
        """Get transfer transaction repository."""
        ...
