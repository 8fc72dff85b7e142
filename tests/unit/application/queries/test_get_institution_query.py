"""Unit tests for GetInstitutionQuery."""

import pytest

from finboard.application.queries import GetInstitutionQuery
from finboard.domain.shared.exceptions import ErrorCode, FailureKind
from finboard_config.settings import Settings


class TestGetInstitutionQuery:
    @pytest.mark.asyncio
    async def test_returns_institution_as_received(self, aggregator):
        query = GetInstitutionQuery(aggregator)

        institution = (await query.execute("ins_109508")).unwrap()

        assert institution.name == "First Platypus Bank"
        aggregator.get_institution.assert_awaited_once_with(
            "ins_109508",
            country_codes=["US"],
        )

    @pytest.mark.asyncio
    async def test_unknown_institution_is_not_found(self, aggregator):
        result = await GetInstitutionQuery(aggregator).execute("ins_unknown")

        assert result.failure.kind == FailureKind.NOT_FOUND
        assert result.failure.code == ErrorCode.INSTITUTION_NOT_FOUND

    @pytest.mark.asyncio
    async def test_country_code_from_settings(self, aggregator):
        settings = Settings(plaid_country_code="gb")
        query = GetInstitutionQuery.from_settings(aggregator, settings)

        await query.execute("ins_109508")

        aggregator.get_institution.assert_awaited_once_with(
            "ins_109508",
            country_codes=["GB"],
        )
