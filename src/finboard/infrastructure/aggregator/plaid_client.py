"""Plaid adapter - Anti-Corruption Layer for the Plaid HTTP API.

This adapter implements the AggregatorPort over Plaid's JSON API using
httpx. It translates Plaid responses into domain value objects and Plaid
error payloads into domain exceptions.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Sequence

import httpx
from pydantic import ValidationError as PydanticValidationError

from finboard.domain.banking.exceptions import (
    AggregatorAuthenticationError,
    AggregatorRequestError,
    AggregatorUnavailableError,
    InstitutionNotFoundError,
    InvalidAggregatorResponseError,
)
from finboard.domain.banking.ports import AggregatorPort
from finboard.domain.banking.value_objects import (
    AccountsSnapshot,
    AggregatorAccount,
    Institution,
)

if TYPE_CHECKING:
    from finboard.domain.shared.value_objects import SecureString
    from finboard_config.settings import Settings

logger = logging.getLogger(__name__)

PLAID_API_VERSION = "2020-09-14"

AUTH_ERROR_CODES = frozenset(
    {
        "INVALID_ACCESS_TOKEN",
        "INVALID_API_KEYS",
        "ITEM_LOGIN_REQUIRED",
        "ACCESS_NOT_GRANTED",
        "UNAUTHORIZED_ENVIRONMENT",
    },
)
UPSTREAM_ERROR_TYPES = frozenset(
    {"API_ERROR", "INSTITUTION_ERROR", "RATE_LIMIT_EXCEEDED"},
)
INSTITUTION_NOT_FOUND_CODES = frozenset(
    {"INVALID_INSTITUTION", "INSTITUTION_NOT_FOUND"},
)


class PlaidAggregatorClient(AggregatorPort):
    """
    Plaid Adapter - Anti-Corruption Layer.

    Responsibilities:
    1. Implement AggregatorPort interface
    2. Translate Plaid payloads to domain value objects
    3. Convert transport and API errors to domain exceptions
    4. Manage the httpx client lifecycle
    """

    def __init__(
        self,
        base_url: str,
        client_id: str,
        secret: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client_id = client_id
        self._secret = secret
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> PlaidAggregatorClient:
        return cls(
            base_url=settings.plaid_base_url,
            client_id=settings.plaid_client_id,
            secret=settings.plaid_secret.get_secret_value(),
            timeout=settings.aggregator_timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={
                    "Content-Type": "application/json",
                    "Plaid-Version": PLAID_API_VERSION,
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # -------------------------------------------------------------------------
    # AggregatorPort
    # -------------------------------------------------------------------------

    async def get_accounts(self, access_token: SecureString) -> AccountsSnapshot:
        logger.debug("Fetching accounts for access token %s", access_token.masked())
        data = await self._post(
            "/accounts/get",
            {"access_token": access_token.get_value()},
        )

        try:
            item = data.get("item") or {}
            snapshot = AccountsSnapshot(
                accounts=tuple(
                    self._map_account(raw) for raw in data.get("accounts", [])
                ),
                institution_id=item.get("institution_id"),
                item_id=item.get("item_id"),
            )
        except (KeyError, TypeError, AttributeError, PydanticValidationError) as e:
            raise InvalidAggregatorResponseError(f"accounts/get: {e}") from e

        logger.info(
            "Fetched %d accounts for item %s",
            len(snapshot.accounts),
            snapshot.item_id,
        )
        return snapshot

    async def get_institution(
        self,
        institution_id: str,
        country_codes: Sequence[str],
    ) -> Institution:
        try:
            data = await self._post(
                "/institutions/get_by_id",
                {
                    "institution_id": institution_id,
                    "country_codes": list(country_codes),
                },
            )
        except AggregatorRequestError as e:
            if e.details.get("error_code") in INSTITUTION_NOT_FOUND_CODES:
                raise InstitutionNotFoundError(institution_id) from e
            raise

        raw = data.get("institution")
        if not isinstance(raw, dict):
            msg = "institutions/get_by_id: missing institution"
            raise InvalidAggregatorResponseError(msg)

        try:
            return Institution.model_validate(raw)
        except PydanticValidationError as e:
            raise InvalidAggregatorResponseError(
                f"institutions/get_by_id: {e}",
            ) from e

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        body = {"client_id": self._client_id, "secret": self._secret, **payload}
        client = await self._get_client()

        try:
            response = await client.post(path, json=body)
        except httpx.TimeoutException as e:
            logger.warning("Aggregator timeout on %s: %s", path, e)
            msg = f"Aggregator timed out on {path}"
            raise AggregatorUnavailableError(msg) from e
        except httpx.TransportError as e:
            logger.warning("Aggregator connection failed on %s: %s", path, e)
            msg = f"Aggregator unreachable on {path}"
            raise AggregatorUnavailableError(msg) from e

        if response.is_success:
            try:
                return response.json(parse_float=Decimal)
            except ValueError as e:
                raise InvalidAggregatorResponseError(f"{path}: {e}") from e

        raise self._translate_error(path, response)

    @staticmethod
    def _translate_error(path: str, response: httpx.Response) -> Exception:
        try:
            error = response.json()
        except ValueError:
            error = {}
        if not isinstance(error, dict):
            error = {}

        error_type = error.get("error_type")
        error_code = error.get("error_code")
        message = error.get("error_message") or response.reason_phrase

        logger.warning(
            "Aggregator returned %d on %s (%s/%s): %s",
            response.status_code,
            path,
            error_type,
            error_code,
            message,
        )

        if error_code in AUTH_ERROR_CODES:
            return AggregatorAuthenticationError(message, error_code=error_code)
        if response.status_code >= 500 or error_type in UPSTREAM_ERROR_TYPES:
            return AggregatorUnavailableError(
                message,
                status_code=response.status_code,
                error_code=error_code,
            )
        return AggregatorRequestError(message, error_code=error_code)

    @staticmethod
    def _map_account(raw: dict[str, Any]) -> AggregatorAccount:
        balances = raw.get("balances") or {}
        return AggregatorAccount(
            account_id=raw["account_id"],
            name=raw["name"],
            official_name=raw.get("official_name"),
            mask=raw.get("mask"),
            type=raw["type"],
            subtype=raw.get("subtype"),
            available_balance=balances.get("available"),
            current_balance=balances.get("current"),
            iso_currency_code=balances.get("iso_currency_code"),
        )
