"""SQLAlchemy models."""

from finboard.infrastructure.persistence.sqlalchemy.models.banking import (
    BankLinkModel,
    TransferTransactionModel,
)
from finboard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)

__all__ = [
    "Base",
    "BankLinkModel",
    "CreatedAtMixin",
    "TransferTransactionModel",
]
