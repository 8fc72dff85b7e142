"""Pytest fixtures for API tests.

Ports and repositories are AsyncMocks injected through FastAPI dependency
overrides, so no database or aggregator is needed.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from finboard.domain.banking.exceptions import InstitutionNotFoundError
from finboard.domain.banking.ports import AggregatorPort
from finboard.domain.banking.repositories import (
    BankLinkRepository,
    TransferTransactionRepository,
)
from finboard.infrastructure.banking import StaticTransactionProvider
from finboard.presentation.api.app import API_V1_PREFIX, create_app
from finboard.presentation.api.dependencies import (
    get_aggregator,
    get_repository_factory,
    get_transaction_provider,
)
from finboard_config.settings import Settings
from tests.shared.fixtures import TEST_USER_ID, make_institution


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    return Settings(
        debug=True,
        api_cors_origins="http://localhost:3000",
        plaid_client_id="test-client",
        plaid_secret="test-secret",
    )


@pytest.fixture
def aggregator():
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
def repo_factory(link_repository, transfer_repository):
    factory = MagicMock()
    factory.bank_link_repository.return_value = link_repository
    factory.transfer_transaction_repository.return_value = transfer_repository
    return factory


@pytest.fixture
def test_client(api_settings, repo_factory, aggregator) -> TestClient:
    """Create a test client with mocked ports and repositories."""
    app = create_app(settings=api_settings)
    provider = StaticTransactionProvider()

    app.dependency_overrides[get_repository_factory] = lambda: repo_factory
    app.dependency_overrides[get_aggregator] = lambda: aggregator
    app.dependency_overrides[get_transaction_provider] = lambda: provider

    return TestClient(app)


@pytest.fixture
def user_headers() -> dict:
    return {"X-User-Id": TEST_USER_ID, "X-User-Email": "test@example.com"}
