"""SQLAlchemy implementation of TransferTransactionRepository."""

from __future__ import annotations

import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from finboard.domain.banking.repositories import TransferTransactionRepository
from finboard.domain.banking.value_objects import TransferTransaction
from finboard.infrastructure.persistence.sqlalchemy.models import (
    TransferTransactionModel,
)

logger = logging.getLogger(__name__)


class TransferTransactionRepositorySQLAlchemy(TransferTransactionRepository):
    """SQLAlchemy implementation of transfer transaction repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_bank_id(self, bank_id: str) -> list[TransferTransaction]:
        stmt = (
            select(TransferTransactionModel)
            .where(
                or_(
                    TransferTransactionModel.sender_bank_id == bank_id,
                    TransferTransactionModel.receiver_bank_id == bank_id,
                ),
            )
            .order_by(TransferTransactionModel.created_at, TransferTransactionModel.id)
        )
        return await self._fetch(stmt)

    async def find_by_account_id(self, account_id: str) -> list[TransferTransaction]:
        stmt = (
            select(TransferTransactionModel)
            .where(
                or_(
                    TransferTransactionModel.sender_id == account_id,
                    TransferTransactionModel.receiver_id == account_id,
                ),
            )
            .order_by(TransferTransactionModel.created_at, TransferTransactionModel.id)
        )
        return await self._fetch(stmt)

    async def save(self, transaction: TransferTransaction) -> None:
        self._session.add(
            TransferTransactionModel(
                id=transaction.id,
                name=transaction.name,
                amount=transaction.amount,
                channel=transaction.channel,
                category=transaction.category,
                email=transaction.email,
                sender_id=transaction.sender_id,
                sender_bank_id=transaction.sender_bank_id,
                receiver_id=transaction.receiver_id,
                receiver_bank_id=transaction.receiver_bank_id,
                created_at=transaction.created_at,
            ),
        )
        await self._session.flush()
        logger.debug("Transfer transaction saved: %s", transaction.id)

    async def _fetch(self, stmt) -> list[TransferTransaction]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _map_to_domain(model: TransferTransactionModel) -> TransferTransaction:
        return TransferTransaction(
            id=model.id,
            name=model.name,
            amount=model.amount,
            created_at=model.created_at,
            channel=model.channel,
            category=model.category,
            sender_bank_id=model.sender_bank_id,
            receiver_bank_id=model.receiver_bank_id,
            sender_id=model.sender_id,
            receiver_id=model.receiver_id,
            email=model.email,
        )
