"""Banking repositories."""

from finboard.infrastructure.persistence.sqlalchemy.repositories.banking.bank_link_repository import (  # NOQA: E501
    BankLinkRepositorySQLAlchemy,
)
from finboard.infrastructure.persistence.sqlalchemy.repositories.banking.transfer_transaction_repository import (  # NOQA: E501
    TransferTransactionRepositorySQLAlchemy,
)

__all__ = [
    "BankLinkRepositorySQLAlchemy",
    "TransferTransactionRepositorySQLAlchemy",
]
