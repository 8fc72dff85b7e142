"""Query layer. Read-only operations for retrieving data."""

from finboard.application.queries.banking import (
    GetBankAccountQuery,
    GetInstitutionQuery,
    GetTransactionsQuery,
    ListBankAccountsQuery,
)

__all__ = [
    "GetBankAccountQuery",
    "GetInstitutionQuery",
    "GetTransactionsQuery",
    "ListBankAccountsQuery",
]
