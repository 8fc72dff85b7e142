"""Transaction merge service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from finboard.domain.banking.value_objects import (
    ExternalTransaction,
    MergedTransaction,
)

if TYPE_CHECKING:
    from finboard.domain.banking.value_objects import TransferTransaction


class TransactionMergeService:
    """Combines transfer and external transaction feeds into one view."""

    @staticmethod
    def merge(
        transfers: Iterable[TransferTransaction],
        external: Iterable[ExternalTransaction],
        link_id: str,
    ) -> list[MergedTransaction]:
        """Merge both feeds for the link ``link_id``, most recent first.

        Every input appears exactly once. Transfers sent from ``link_id`` are
        debits, all others credits. Equal dates keep input order, transfers
        ahead of external transactions.
        """
        merged = [MergedTransaction.from_transfer(t, link_id) for t in transfers]
        merged.extend(MergedTransaction.from_external(t) for t in external)
        return TransactionMergeService.sort_by_recency(merged)

    @staticmethod
    def sort_by_recency(
        transactions: Iterable[MergedTransaction],
    ) -> list[MergedTransaction]:
        return sorted(transactions, key=lambda t: t.occurred_at, reverse=True)

    @staticmethod
    def transfer_as_external(transfer: TransferTransaction) -> ExternalTransaction:
        """Reshape a stored transfer into the external transaction shape.

        Stored transfers carry no pending state or logo, so ``pending`` is
        always False and ``image`` empty. The category doubles as ``type``.
        """
        return ExternalTransaction(
            id=transfer.id,
            name=transfer.name,
            payment_channel=transfer.channel,
            type=transfer.category,
            account_id=transfer.sender_bank_id,
            amount=transfer.amount,
            pending=False,
            category=transfer.category,
            date=transfer.date,
            image="",
        )
