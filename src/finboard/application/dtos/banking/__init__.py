"""Banking DTOs."""

from finboard.application.dtos.banking.account_detail_dto import AccountDetailDTO
from finboard.application.dtos.banking.account_view_dto import AccountViewDTO
from finboard.application.dtos.banking.accounts_overview_dto import (
    AccountsOverviewDTO,
    LinkFailure,
)

__all__ = [
    "AccountDetailDTO",
    "AccountViewDTO",
    "AccountsOverviewDTO",
    "LinkFailure",
]
