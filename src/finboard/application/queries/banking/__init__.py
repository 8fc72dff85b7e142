"""Banking queries."""

from finboard.application.queries.banking.account_view_loader import (
    AccountViewLoader,
)
from finboard.application.queries.banking.get_bank_account_query import (
    GetBankAccountQuery,
)
from finboard.application.queries.banking.get_institution_query import (
    GetInstitutionQuery,
)
from finboard.application.queries.banking.get_transactions_query import (
    GetTransactionsQuery,
)
from finboard.application.queries.banking.list_bank_accounts_query import (
    ListBankAccountsQuery,
)

__all__ = [
    "AccountViewLoader",
    "GetBankAccountQuery",
    "GetInstitutionQuery",
    "GetTransactionsQuery",
    "ListBankAccountsQuery",
]
