"""Get bank account query - one account with its merged transactions."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from finboard.application.dtos import QueryResult
from finboard.application.dtos.banking import AccountDetailDTO
from finboard.application.queries.banking.account_view_loader import (
    AccountViewLoader,
)
from finboard.application.queries.banking.get_institution_query import (
    GetInstitutionQuery,
)
from finboard.application.queries.banking.get_transactions_query import (
    GetTransactionsQuery,
)
from finboard.domain.banking.exceptions import BankLinkNotFoundError
from finboard.domain.banking.services import TransactionMergeService
from finboard.domain.shared.exceptions import DomainException

if TYPE_CHECKING:
    from finboard.application.factories import RepositoryFactory
    from finboard.domain.banking.ports import AggregatorPort, TransactionProvider
    from finboard.domain.banking.repositories import (
        BankLinkRepository,
        TransferTransactionRepository,
    )
    from finboard.domain.banking.value_objects import (
        BankLink,
        ExternalTransaction,
        TransferTransaction,
    )

logger = logging.getLogger(__name__)


class GetBankAccountQuery:
    """Load one bank link's account and its transactions, most recent first."""

    def __init__(
        self,
        link_repository: BankLinkRepository,
        transfer_repository: TransferTransactionRepository,
        aggregator: AggregatorPort,
        transactions_query: GetTransactionsQuery,
        institution_query: GetInstitutionQuery | None = None,
    ):
        self._link_repo = link_repository
        self._transfer_repo = transfer_repository
        self._transactions_query = transactions_query
        self._loader = AccountViewLoader(
            aggregator=aggregator,
            institution_query=institution_query or GetInstitutionQuery(aggregator),
        )

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        aggregator: AggregatorPort,
        provider: TransactionProvider,
        institution_query: GetInstitutionQuery | None = None,
    ) -> GetBankAccountQuery:
        return cls(
            link_repository=factory.bank_link_repository(),
            transfer_repository=factory.transfer_transaction_repository(),
            aggregator=aggregator,
            transactions_query=GetTransactionsQuery.from_factory(factory, provider),
            institution_query=institution_query,
        )

    async def execute(self, link_id: str) -> QueryResult[AccountDetailDTO]:
        try:
            detail = await self._load(link_id)
        except DomainException as e:
            logger.error(
                "Failed to get account for bank link %s: [%s] %s",
                link_id,
                e.code.value,
                e.message,
            )
            return QueryResult.fail(e)
        return QueryResult.success(detail)

    async def _load(self, link_id: str) -> AccountDetailDTO:
        link = await self._link_repo.find_by_id(link_id)
        if link is None:
            raise BankLinkNotFoundError(link_id)

        account, stored = await asyncio.gather(
            self._loader.load(link),
            self._load_stored(link),
            return_exceptions=True,
        )
        if isinstance(account, BaseException):
            raise account
        if isinstance(stored, BaseException):
            raise stored

        transfers, external = stored
        transactions = TransactionMergeService.merge(transfers, external, link.id)
        return AccountDetailDTO(account=account, transactions=transactions)

    async def _load_stored(
        self,
        link: BankLink,
    ) -> tuple[list[TransferTransaction], list[ExternalTransaction]]:
        # Both reads share one database session, which must not be used
        # concurrently; they overlap only with the aggregator calls.
        transfers = await self._transfer_repo.find_by_bank_id(link.id)
        external = await self._transactions_query.fetch(
            link.access_token,
            link.user_id,
        )
        return transfers, external
