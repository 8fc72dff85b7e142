"""Merged transaction value object."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from finboard.domain.banking.value_objects.external_transaction import (
    ExternalTransaction,
)
from finboard.domain.banking.value_objects.transfer_transaction import (
    TransferTransaction,
)
from finboard.domain.shared.time import parse_transaction_date


class TransactionOrigin(str, Enum):
    """Which feed a merged transaction came from."""

    TRANSFER = "transfer"
    EXTERNAL = "external"


class MergedTransaction(BaseModel):
    """Unified transaction view over transfers and external transactions."""

    id: str
    name: str
    amount: Decimal
    date: str
    payment_channel: str | None = None
    category: str | None = None
    type: str | None = None
    account_id: str | None = None
    pending: bool | None = None
    image: str | None = None
    origin: TransactionOrigin = Field(default=TransactionOrigin.EXTERNAL)

    model_config = ConfigDict(frozen=True)

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return str(value)

    @property
    def occurred_at(self) -> datetime:
        return parse_transaction_date(self.date)

    @classmethod
    def from_transfer(
        cls,
        transfer: TransferTransaction,
        link_id: str,
    ) -> MergedTransaction:
        return cls(
            id=transfer.id,
            name=transfer.name,
            amount=transfer.amount,
            date=transfer.date,
            payment_channel=transfer.channel,
            category=transfer.category,
            type=transfer.direction_for(link_id),
            origin=TransactionOrigin.TRANSFER,
        )

    @classmethod
    def from_external(cls, transaction: ExternalTransaction) -> MergedTransaction:
        return cls(
            id=transaction.id,
            name=transaction.name,
            amount=transaction.amount,
            date=transaction.date,
            payment_channel=transaction.payment_channel,
            category=transaction.category,
            type=transaction.type,
            account_id=transaction.account_id,
            pending=transaction.pending,
            image=transaction.image,
            origin=TransactionOrigin.EXTERNAL,
        )
