"""DTO for a single account with its transactions."""

from dataclasses import dataclass, field

from finboard.application.dtos.banking.account_view_dto import AccountViewDTO
from finboard.domain.banking.value_objects import MergedTransaction


@dataclass(frozen=True)
class AccountDetailDTO:
    """One account and its merged transactions, most recent first."""

    account: AccountViewDTO
    transactions: list[MergedTransaction] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "data": self.account.to_dict(),
            "transactions": [t.model_dump(mode="json") for t in self.transactions],
        }
