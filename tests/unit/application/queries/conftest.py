"""Fixtures for query tests: ports and repositories as AsyncMocks."""

from unittest.mock import AsyncMock

import pytest

from finboard.domain.banking.exceptions import InstitutionNotFoundError
from finboard.domain.banking.ports import AggregatorPort, TransactionProvider
from finboard.domain.banking.repositories import (
    BankLinkRepository,
    TransferTransactionRepository,
)
from tests.shared.fixtures import make_institution


@pytest.fixture
def aggregator():
    """Aggregator mock that knows a single institution."""
    mock = AsyncMock(spec=AggregatorPort)
    institution = make_institution()

    def _get_institution(institution_id, country_codes):
        if institution_id != institution.institution_id:
            raise InstitutionNotFoundError(institution_id)
        return institution

    mock.get_institution.side_effect = _get_institution
    return mock


@pytest.fixture
def link_repository():
    return AsyncMock(spec=BankLinkRepository)


@pytest.fixture
def transfer_repository():
    mock = AsyncMock(spec=TransferTransactionRepository)
    mock.find_by_bank_id.return_value = []
    mock.find_by_account_id.return_value = []
    return mock


@pytest.fixture
def provider():
    mock = AsyncMock(spec=TransactionProvider)
    mock.fetch_transactions.return_value = []
    return mock
