"""Loads the live account view for one bank link."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from finboard.application.dtos.banking import AccountViewDTO
from finboard.domain.banking.exceptions import (
    AggregatorAccountNotFoundError,
    InvalidAggregatorResponseError,
)

if TYPE_CHECKING:
    from finboard.application.queries.banking.get_institution_query import (
        GetInstitutionQuery,
    )
    from finboard.domain.banking.ports import AggregatorPort
    from finboard.domain.banking.value_objects import BankLink

logger = logging.getLogger(__name__)


class AccountViewLoader:
    """Fetch a link's first account and its institution from the aggregator."""

    def __init__(
        self,
        aggregator: AggregatorPort,
        institution_query: GetInstitutionQuery,
    ):
        self._aggregator = aggregator
        self._institution_query = institution_query

    async def load(self, link: BankLink) -> AccountViewDTO:
        snapshot = await self._aggregator.get_accounts(link.access_token)

        account = snapshot.primary_account
        if account is None:
            raise AggregatorAccountNotFoundError(link.id)

        institution_id = snapshot.institution_id or link.institution_id
        if not institution_id:
            msg = f"no institution id for bank link '{link.id}'"
            raise InvalidAggregatorResponseError(msg)

        institution = await self._institution_query.fetch(institution_id)

        logger.debug(
            "Loaded account %s for link %s at %s",
            account.account_id,
            link.id,
            institution.name,
        )
        return AccountViewDTO.from_domain(account, link, institution)
