"""Value objects for banking domain."""

from finboard.domain.banking.value_objects.aggregator_account import (
    AccountsSnapshot,
    AggregatorAccount,
)
from finboard.domain.banking.value_objects.bank_link import BankLink
from finboard.domain.banking.value_objects.external_transaction import (
    ExternalTransaction,
    first_category,
)
from finboard.domain.banking.value_objects.institution import Institution
from finboard.domain.banking.value_objects.merged_transaction import (
    MergedTransaction,
    TransactionOrigin,
)
from finboard.domain.banking.value_objects.transfer_transaction import (
    TransferTransaction,
)

__all__ = [
    "AccountsSnapshot",
    "AggregatorAccount",
    "BankLink",
    "ExternalTransaction",
    "Institution",
    "MergedTransaction",
    "TransactionOrigin",
    "TransferTransaction",
    "first_category",
]
