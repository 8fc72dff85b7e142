"""Get institution query - display metadata for a financial institution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from finboard.application.dtos import QueryResult
from finboard.domain.shared.exceptions import DomainException

if TYPE_CHECKING:
    from finboard.domain.banking.ports import AggregatorPort
    from finboard.domain.banking.value_objects import Institution
    from finboard_config.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY_CODE = "US"


class GetInstitutionQuery:
    """Resolve an institution id through the aggregator.

    Lookups are restricted to a single country code.
    """

    def __init__(
        self,
        aggregator: AggregatorPort,
        country_code: str = DEFAULT_COUNTRY_CODE,
    ):
        self._aggregator = aggregator
        self._country_code = country_code

    @classmethod
    def from_settings(
        cls,
        aggregator: AggregatorPort,
        settings: Settings,
    ) -> GetInstitutionQuery:
        return cls(aggregator=aggregator, country_code=settings.plaid_country_code)

    async def execute(self, institution_id: str) -> QueryResult[Institution]:
        try:
            institution = await self.fetch(institution_id)
        except DomainException as e:
            logger.warning(
                "Failed to get institution %s: [%s] %s",
                institution_id,
                e.code.value,
                e.message,
            )
            return QueryResult.fail(e)
        return QueryResult.success(institution)

    async def fetch(self, institution_id: str) -> Institution:
        """Return the institution as received, raising domain errors."""
        return await self._aggregator.get_institution(
            institution_id,
            country_codes=[self._country_code],
        )
