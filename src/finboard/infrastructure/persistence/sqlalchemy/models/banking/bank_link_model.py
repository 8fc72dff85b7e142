"""SQLAlchemy model for bank links."""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from finboard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class BankLinkModel(Base, CreatedAtMixin):
    """Database model for bank links."""

    __tablename__ = "bank_links"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    # Aggregator credentials and identifiers
    access_token: Mapped[str] = mapped_column(String(255), nullable=False)
    account_id: Mapped[Optional[str]] = mapped_column(String(64))
    institution_id: Mapped[Optional[str]] = mapped_column(String(64))

    shareable_id: Mapped[Optional[str]] = mapped_column(String(255), unique=True)

    def __repr__(self) -> str:
        return f"<BankLinkModel(id={self.id}, user_id={self.user_id})>"
