"""Transaction provider backed by a fixed set of aggregator records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

from finboard.domain.banking.ports import TransactionProvider
from finboard.domain.banking.value_objects import ExternalTransaction
from finboard.infrastructure.banking.mock_data import MOCK_AGGREGATOR_TRANSACTIONS

if TYPE_CHECKING:
    from finboard.domain.shared.value_objects import SecureString

logger = logging.getLogger(__name__)


class StaticTransactionProvider(TransactionProvider):
    """Serves the same records for every access token.

    Stands in for the live aggregator feed. Records are normalized once at
    construction, so repeated calls return equal lists in the same order.
    """

    def __init__(
        self,
        records: Iterable[dict[str, Any]] = MOCK_AGGREGATOR_TRANSACTIONS,
    ):
        self._transactions = tuple(
            ExternalTransaction.from_aggregator_payload(r) for r in records
        )

    async def fetch_transactions(
        self,
        access_token: SecureString,
    ) -> list[ExternalTransaction]:
        logger.debug(
            "Using static transactions for access token %s",
            access_token.masked(),
        )
        return list(self._transactions)


class EmptyTransactionProvider(TransactionProvider):
    """Provides no external transactions; only stored transfers are shown."""

    async def fetch_transactions(
        self,
        access_token: SecureString,
    ) -> list[ExternalTransaction]:
        return []
