"""Transaction provider port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from finboard.domain.banking.value_objects import ExternalTransaction
    from finboard.domain.shared.value_objects import SecureString


class TransactionProvider(ABC):
    """Source of externally provided transactions for a linked item.

    Implementations return transactions already normalized to the common
    ExternalTransaction shape. Ordering is up to the provider; callers sort.
    """

    @abstractmethod
    async def fetch_transactions(
        self,
        access_token: SecureString,
    ) -> list[ExternalTransaction]:
        """
        Fetch transactions for the item behind ``access_token``.

        Raises
        ------
        AggregatorUnavailableError
            If the upstream feed cannot be reached
        """
