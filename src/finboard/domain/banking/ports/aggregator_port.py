"""Aggregator port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from finboard.domain.banking.value_objects import AccountsSnapshot, Institution
    from finboard.domain.shared.value_objects import SecureString


class AggregatorPort(ABC):
    """
    Interface for the financial-data aggregation API.

    This defines what our domain needs from the aggregator that holds the
    live connection to the user's banks (e.g. Plaid).
    """

    @abstractmethod
    async def get_accounts(self, access_token: SecureString) -> AccountsSnapshot:
        """
        Fetch live balances and metadata for a linked item.

        Parameters
        ----------
        access_token
            Aggregator access token of the bank link

        Returns
        -------
        Snapshot of the item's accounts and its institution id

        Raises
        ------
        AggregatorAuthenticationError
            If the token is invalid or the item needs re-authentication
        AggregatorUnavailableError
            If the aggregator cannot be reached
        """

    @abstractmethod
    async def get_institution(
        self,
        institution_id: str,
        country_codes: Sequence[str],
    ) -> Institution:
        """
        Look up display metadata for an institution.

        Parameters
        ----------
        institution_id
            Aggregator institution id
        country_codes
            Countries the lookup is restricted to

        Raises
        ------
        InstitutionNotFoundError
            If no institution matches
        AggregatorUnavailableError
            If the aggregator cannot be reached
        """

    async def close(self) -> None:
        """Release network resources held by the adapter."""
