"""SQLAlchemy model for transfer transactions."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from finboard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class TransferTransactionModel(Base, CreatedAtMixin):
    """Database model for transfers between bank links."""

    __tablename__ = "transfer_transactions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    channel: Mapped[Optional[str]] = mapped_column(String(50))
    category: Mapped[Optional[str]] = mapped_column(String(100))
    email: Mapped[Optional[str]] = mapped_column(String(255))

    # Parties
    sender_id: Mapped[Optional[str]] = mapped_column(String(64))
    sender_bank_id: Mapped[str] = mapped_column(String(64), nullable=False)
    receiver_id: Mapped[Optional[str]] = mapped_column(String(64))
    receiver_bank_id: Mapped[Optional[str]] = mapped_column(String(64))

    __table_args__ = (
        Index("idx_transfer_sender_bank", "sender_bank_id"),
        Index("idx_transfer_receiver_bank", "receiver_bank_id"),
        Index("idx_transfer_sender", "sender_id"),
        Index("idx_transfer_receiver", "receiver_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<TransferTransactionModel(id={self.id}, "
            f"amount={self.amount}, sender_bank_id={self.sender_bank_id})>"
        )
