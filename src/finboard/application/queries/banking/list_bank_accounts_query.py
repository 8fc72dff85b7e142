"""List bank accounts query - every linked account of a user with totals."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from finboard.application.dtos import QueryResult
from finboard.application.dtos.banking import (
    AccountsOverviewDTO,
    AccountViewDTO,
    LinkFailure,
)
from finboard.application.queries.banking.account_view_loader import (
    AccountViewLoader,
)
from finboard.application.queries.banking.get_institution_query import (
    GetInstitutionQuery,
)
from finboard.domain.shared.exceptions import DomainException

if TYPE_CHECKING:
    from finboard.application.factories import RepositoryFactory
    from finboard.domain.banking.ports import AggregatorPort
    from finboard.domain.banking.repositories import BankLinkRepository
    from finboard.domain.banking.value_objects import BankLink

logger = logging.getLogger(__name__)


class ListBankAccountsQuery:
    """Load the live account of every bank link of a user.

    Aggregator calls for the links run concurrently. By default a failing
    link is reported in ``errors`` and the remaining accounts are still
    returned; with ``fail_fast`` the first failure fails the whole query.
    """

    def __init__(
        self,
        link_repository: BankLinkRepository,
        aggregator: AggregatorPort,
        institution_query: GetInstitutionQuery | None = None,
    ):
        self._link_repo = link_repository
        self._loader = AccountViewLoader(
            aggregator=aggregator,
            institution_query=institution_query or GetInstitutionQuery(aggregator),
        )

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        aggregator: AggregatorPort,
        institution_query: GetInstitutionQuery | None = None,
    ) -> ListBankAccountsQuery:
        return cls(
            link_repository=factory.bank_link_repository(),
            aggregator=aggregator,
            institution_query=institution_query,
        )

    async def execute(
        self,
        user_id: str,
        fail_fast: bool = False,
    ) -> QueryResult[AccountsOverviewDTO]:
        try:
            links = await self._link_repo.find_all_by_user(user_id)
            if fail_fast:
                overview = await self._load_all_or_nothing(links)
            else:
                overview = await self._load_isolated(links)
        except DomainException as e:
            logger.error(
                "Failed to get accounts for user %s: [%s] %s",
                user_id,
                e.code.value,
                e.message,
            )
            return QueryResult.fail(e)

        if overview.errors:
            logger.warning(
                "Loaded %d of %d accounts for user %s",
                len(overview.accounts),
                overview.total_banks,
                user_id,
            )
        return QueryResult.success(overview)

    async def _load_all_or_nothing(self, links: list[BankLink]) -> AccountsOverviewDTO:
        outcomes = await asyncio.gather(
            *(self._loader.load(link) for link in links),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return AccountsOverviewDTO(total_banks=len(links), accounts=list(outcomes))

    async def _load_isolated(self, links: list[BankLink]) -> AccountsOverviewDTO:
        outcomes = await asyncio.gather(*(self._try_load(link) for link in links))

        overview = AccountsOverviewDTO(total_banks=len(links))
        for outcome in outcomes:
            if isinstance(outcome, LinkFailure):
                overview.errors.append(outcome)
            else:
                overview.accounts.append(outcome)
        return overview

    async def _try_load(self, link: BankLink) -> AccountViewDTO | LinkFailure:
        try:
            return await self._loader.load(link)
        except DomainException as e:
            logger.warning(
                "Skipping bank link %s: [%s] %s",
                link.id,
                e.code.value,
                e.message,
            )
            return LinkFailure.from_exception(link.id, e)
