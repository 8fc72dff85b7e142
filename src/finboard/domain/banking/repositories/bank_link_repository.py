"""Repository interface for bank links."""

from abc import ABC, abstractmethod
from typing import Optional

from finboard.domain.banking.value_objects import BankLink


class BankLinkRepository(ABC):
    """Repository for bank links stored when a user connects a bank."""

    @abstractmethod
    async def find_all_by_user(self, user_id: str) -> list[BankLink]:
        """
        Find all bank links of a user.

        Parameters
        ----------
        user_id
            The owning user

        Returns
        -------
        Bank links in creation order
        """

    @abstractmethod
    async def find_by_id(self, link_id: str) -> Optional[BankLink]:
        """
        Find a bank link by its id.

        Returns
        -------
        Bank link or None if not found
        """

    @abstractmethod
    async def save(self, link: BankLink) -> None:
        """Save or update a bank link."""
