"""Unit tests for the Plaid adapter (Anti-Corruption Layer).

The HTTP API is replaced by an httpx.MockTransport, so these tests cover
request shape, response mapping and error translation without network.
"""

import json
from decimal import Decimal

import httpx
import pytest

from finboard.domain.banking.exceptions import (
    AggregatorAuthenticationError,
    AggregatorRequestError,
    AggregatorUnavailableError,
    InstitutionNotFoundError,
    InvalidAggregatorResponseError,
)
from finboard.domain.shared.value_objects import SecureString
from finboard.infrastructure.aggregator import PlaidAggregatorClient
from finboard.infrastructure.aggregator.plaid_client import PLAID_API_VERSION
from finboard_config.settings import Settings

TOKEN = SecureString("access-sandbox-1234")

ACCOUNTS_RESPONSE = {
    "accounts": [
        {
            "account_id": "BxBXxLj1m4HMXBm9WZZmCWVbPjX16EHwv99vp",
            "balances": {
                "available": 100,
                "current": 110.25,
                "iso_currency_code": "USD",
                "limit": None,
            },
            "mask": "0000",
            "name": "Plaid Checking",
            "official_name": "Plaid Gold Standard 0% Interest Checking",
            "subtype": "checking",
            "type": "depository",
        },
        {
            "account_id": "dVzbVMLjrxTnLjX4G66XUp5GLklm4oiZy88yK",
            "balances": {"available": None, "current": 410, "limit": 2000},
            "mask": "3333",
            "name": "Plaid Credit Card",
            "official_name": None,
            "subtype": "credit card",
            "type": "credit",
        },
    ],
    "item": {"institution_id": "ins_109508", "item_id": "Ed6bjNrDLJfGvZWwnkQlfxwoNz54B5C97ejBr"},
    "request_id": "bkVE1BHWMAZ9Rnr",
}

INSTITUTION_RESPONSE = {
    "institution": {
        "institution_id": "ins_109508",
        "name": "First Platypus Bank",
        "country_codes": ["US"],
        "products": ["auth", "balance", "transactions"],
        "url": "https://www.platypus.example",
        "primary_color": "#1f1f1f",
        "logo": None,
        "routing_numbers": ["011000138"],
        "oauth": False,
    },
    "request_id": "m8MDnv9okwxFNBV",
}


def _error(status: int, error_type: str, error_code: str, message: str = "boom"):
    return httpx.Response(
        status,
        json={
            "error_type": error_type,
            "error_code": error_code,
            "error_message": message,
            "display_message": None,
            "request_id": "abc",
        },
    )


def _client(handler) -> PlaidAggregatorClient:
    return PlaidAggregatorClient(
        base_url="https://sandbox.plaid.com",
        client_id="client-id",
        secret="client-secret",
        transport=httpx.MockTransport(handler),
    )


class TestGetAccounts:
    """Tests for accounts/get."""

    @pytest.mark.asyncio
    async def test_maps_accounts_and_item(self):
        # Arrange
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=ACCOUNTS_RESPONSE)

        client = _client(handler)

        # Act
        snapshot = await client.get_accounts(TOKEN)

        # Assert
        assert snapshot.institution_id == "ins_109508"
        assert len(snapshot.accounts) == 2
        primary = snapshot.primary_account
        assert primary.name == "Plaid Checking"
        assert primary.current_balance == Decimal("110.25")
        assert primary.available_balance == Decimal("100")
        assert primary.iso_currency_code == "USD"
        assert snapshot.accounts[1].available_balance is None

        request = requests[0]
        assert request.url.path == "/accounts/get"
        assert request.headers["Plaid-Version"] == PLAID_API_VERSION
        assert json.loads(request.content) == {
            "client_id": "client-id",
            "secret": "client-secret",
            "access_token": "access-sandbox-1234",
        }

        await client.close()

    @pytest.mark.asyncio
    async def test_invalid_access_token_is_unauthorized(self):
        client = _client(
            lambda _: _error(400, "INVALID_INPUT", "INVALID_ACCESS_TOKEN"),
        )

        with pytest.raises(AggregatorAuthenticationError) as exc_info:
            await client.get_accounts(TOKEN)

        assert exc_info.value.details == {"error_code": "INVALID_ACCESS_TOKEN"}

    @pytest.mark.asyncio
    async def test_item_login_required_is_unauthorized(self):
        client = _client(lambda _: _error(400, "ITEM_ERROR", "ITEM_LOGIN_REQUIRED"))

        with pytest.raises(AggregatorAuthenticationError):
            await client.get_accounts(TOKEN)

    @pytest.mark.asyncio
    async def test_server_error_is_unavailable(self):
        client = _client(lambda _: _error(500, "API_ERROR", "INTERNAL_SERVER_ERROR"))

        with pytest.raises(AggregatorUnavailableError) as exc_info:
            await client.get_accounts(TOKEN)

        assert exc_info.value.details["status_code"] == 500

    @pytest.mark.asyncio
    async def test_rate_limit_is_unavailable(self):
        client = _client(
            lambda _: _error(429, "RATE_LIMIT_EXCEEDED", "ACCOUNTS_LIMIT"),
        )

        with pytest.raises(AggregatorUnavailableError):
            await client.get_accounts(TOKEN)

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(AggregatorUnavailableError):
            await _client(handler).get_accounts(TOKEN)

    @pytest.mark.asyncio
    async def test_connect_error_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(AggregatorUnavailableError):
            await _client(handler).get_accounts(TOKEN)

    @pytest.mark.asyncio
    async def test_other_client_error_is_invalid_request(self):
        client = _client(lambda _: _error(400, "INVALID_REQUEST", "MISSING_FIELDS"))

        with pytest.raises(AggregatorRequestError):
            await client.get_accounts(TOKEN)

    @pytest.mark.asyncio
    async def test_malformed_account_is_invalid_response(self):
        client = _client(
            lambda _: httpx.Response(200, json={"accounts": [{"name": "x"}]}),
        )

        with pytest.raises(InvalidAggregatorResponseError):
            await client.get_accounts(TOKEN)

    @pytest.mark.asyncio
    async def test_non_json_body_is_invalid_response(self):
        client = _client(lambda _: httpx.Response(200, text="<html>"))

        with pytest.raises(InvalidAggregatorResponseError):
            await client.get_accounts(TOKEN)


class TestGetInstitution:
    """Tests for institutions/get_by_id."""

    @pytest.mark.asyncio
    async def test_returns_institution(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=INSTITUTION_RESPONSE)

        institution = await _client(handler).get_institution("ins_109508", ["US"])

        assert institution.name == "First Platypus Bank"
        assert institution.products == ("auth", "balance", "transactions")
        body = json.loads(requests[0].content)
        assert requests[0].url.path == "/institutions/get_by_id"
        assert body["institution_id"] == "ins_109508"
        assert body["country_codes"] == ["US"]

    @pytest.mark.asyncio
    async def test_unknown_institution_is_not_found(self):
        client = _client(
            lambda _: _error(400, "INVALID_INPUT", "INVALID_INSTITUTION"),
        )

        with pytest.raises(InstitutionNotFoundError):
            await client.get_institution("ins_nope", ["US"])

    @pytest.mark.asyncio
    async def test_missing_institution_is_invalid_response(self):
        client = _client(lambda _: httpx.Response(200, json={"request_id": "x"}))

        with pytest.raises(InvalidAggregatorResponseError):
            await client.get_institution("ins_109508", ["US"])


class TestFromSettings:
    def test_uses_environment_base_url(self):
        settings = Settings(
            plaid_client_id="id",
            plaid_secret="secret",
            plaid_env="development",
        )

        client = PlaidAggregatorClient.from_settings(settings)

        assert client._base_url == "https://development.plaid.com"
