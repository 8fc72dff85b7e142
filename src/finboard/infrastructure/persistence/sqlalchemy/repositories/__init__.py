"""SQLAlchemy repository implementations."""

from finboard.infrastructure.persistence.sqlalchemy.repositories.banking import (
    BankLinkRepositorySQLAlchemy,
    TransferTransactionRepositorySQLAlchemy,
)
from finboard.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)

__all__ = [
    "BankLinkRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "TransferTransactionRepositorySQLAlchemy",
]
