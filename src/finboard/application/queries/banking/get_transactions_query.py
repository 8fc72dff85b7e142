"""Get transactions query - external feed plus the user's stored transfers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from finboard.application.dtos import QueryResult
from finboard.domain.banking.services import TransactionMergeService
from finboard.domain.shared.exceptions import DomainException

if TYPE_CHECKING:
    from finboard.application.factories import RepositoryFactory
    from finboard.domain.banking.ports import TransactionProvider
    from finboard.domain.banking.repositories import TransferTransactionRepository
    from finboard.domain.banking.value_objects import ExternalTransaction
    from finboard.domain.shared.value_objects import SecureString

logger = logging.getLogger(__name__)


class GetTransactionsQuery:
    """Collect the transactions shown for a user's linked item.

    The provider's records come first, followed by the user's stored
    transfers reshaped to the same form. No sorting happens here.
    """

    def __init__(
        self,
        provider: TransactionProvider,
        transfer_repository: TransferTransactionRepository,
    ):
        self._provider = provider
        self._transfer_repo = transfer_repository

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        provider: TransactionProvider,
    ) -> GetTransactionsQuery:
        return cls(
            provider=provider,
            transfer_repository=factory.transfer_transaction_repository(),
        )

    async def execute(
        self,
        access_token: SecureString,
        user_id: str,
    ) -> QueryResult[list[ExternalTransaction]]:
        try:
            transactions = await self.fetch(access_token, user_id)
        except DomainException as e:
            logger.warning(
                "Failed to get transactions for user %s: [%s] %s",
                user_id,
                e.code.value,
                e.message,
            )
            return QueryResult.fail(e)
        return QueryResult.success(transactions)

    async def fetch(
        self,
        access_token: SecureString,
        user_id: str,
    ) -> list[ExternalTransaction]:
        logger.debug(
            "Fetching transactions for access token %s via %s",
            access_token.masked(),
            type(self._provider).__name__,
        )
        external = await self._provider.fetch_transactions(access_token)

        stored = await self._transfer_repo.find_by_account_id(user_id)
        reshaped = [TransactionMergeService.transfer_as_external(t) for t in stored]

        logger.debug(
            "Collected %d provider and %d stored transactions for user %s",
            len(external),
            len(reshaped),
            user_id,
        )
        return [*external, *reshaped]
