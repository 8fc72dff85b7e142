"""Unit tests for GetTransactionsQuery."""

from unittest.mock import MagicMock

import pytest

from finboard.application.queries import GetTransactionsQuery
from finboard.domain.shared.value_objects import SecureString
from finboard.infrastructure.banking import StaticTransactionProvider
from tests.shared.fixtures import TEST_USER_ID, make_external, make_transfer

TOKEN = SecureString("access-sandbox-b1")


class TestGetTransactionsQuery:
    """Tests for the transaction source."""

    @pytest.mark.asyncio
    async def test_provider_records_come_before_stored_transfers(
        self,
        provider,
        transfer_repository,
    ):
        # Arrange
        provider.fetch_transactions.return_value = [
            make_external("e1", date="2024-11-01"),
            make_external("e2", date="2024-12-01"),
        ]
        transfer_repository.find_by_account_id.return_value = [
            make_transfer("t1"),
        ]
        query = GetTransactionsQuery(provider, transfer_repository)

        # Act
        transactions = (await query.execute(TOKEN, TEST_USER_ID)).unwrap()

        # Assert - no sorting, provider order then stored order
        assert [t.id for t in transactions] == ["e1", "e2", "t1"]
        provider.fetch_transactions.assert_awaited_once_with(TOKEN)
        transfer_repository.find_by_account_id.assert_awaited_once_with(TEST_USER_ID)

    @pytest.mark.asyncio
    async def test_stored_transfer_uses_category_as_type(
        self,
        provider,
        transfer_repository,
    ):
        transfer_repository.find_by_account_id.return_value = [
            make_transfer("t1", category="Rent"),
        ]
        query = GetTransactionsQuery(provider, transfer_repository)

        transactions = await query.fetch(TOKEN, TEST_USER_ID)

        assert transactions[0].type == "Rent"
        assert transactions[0].pending is False
        assert transactions[0].image == ""

    @pytest.mark.asyncio
    async def test_identical_inputs_give_identical_output(self, transfer_repository):
        transfer_repository.find_by_account_id.return_value = [make_transfer("t1")]
        query = GetTransactionsQuery(StaticTransactionProvider(), transfer_repository)

        first = await query.fetch(TOKEN, TEST_USER_ID)
        second = await query.fetch(TOKEN, TEST_USER_ID)

        assert first == second
        assert len(first) == 11

    @pytest.mark.asyncio
    async def test_from_factory(self, provider, transfer_repository):
        factory = MagicMock()
        factory.transfer_transaction_repository.return_value = transfer_repository

        query = GetTransactionsQuery.from_factory(factory, provider)

        assert (await query.execute(TOKEN, TEST_USER_ID)).unwrap() == []
