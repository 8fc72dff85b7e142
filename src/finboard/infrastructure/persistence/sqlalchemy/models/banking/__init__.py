"""Banking models."""

from finboard.infrastructure.persistence.sqlalchemy.models.banking.bank_link_model import (  # NOQA: E501
    BankLinkModel,
)
from finboard.infrastructure.persistence.sqlalchemy.models.banking.transfer_transaction_model import (  # NOQA: E501
    TransferTransactionModel,
)

__all__ = ["BankLinkModel", "TransferTransactionModel"]
