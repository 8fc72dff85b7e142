"""Repository interface for transfer transactions."""

from abc import ABC, abstractmethod

from finboard.domain.banking.value_objects import TransferTransaction


class TransferTransactionRepository(ABC):
    """Repository for transfers recorded between bank links."""

    @abstractmethod
    async def find_by_bank_id(self, bank_id: str) -> list[TransferTransaction]:
        """
        Find transfers where the link is sender or receiver.

        Parameters
        ----------
        bank_id
            Bank link id

        Returns
        -------
        Transfers in creation order
        """

    @abstractmethod
    async def find_by_account_id(self, account_id: str) -> list[TransferTransaction]:
        """
        Find transfers sent or received by an account holder.

        Parameters
        ----------
        account_id
            User id of the sending or receiving party

        Returns
        -------
        Transfers in creation order
        """

    @abstractmethod
    async def save(self, transaction: TransferTransaction) -> None:
        """Save a transfer transaction."""
