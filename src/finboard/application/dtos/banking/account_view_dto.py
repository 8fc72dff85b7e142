"""DTO for a bank account as shown on the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from finboard.domain.banking.value_objects import (
        AggregatorAccount,
        BankLink,
        Institution,
    )


@dataclass(frozen=True)
class AccountViewDTO:
    """Live account data joined with its bank link and institution."""

    id: str
    available_balance: Optional[Decimal]
    current_balance: Decimal
    institution_id: str
    institution_name: str
    name: str
    official_name: Optional[str]
    mask: Optional[str]
    type: str
    subtype: Optional[str]
    link_id: str
    shareable_id: Optional[str] = None

    @classmethod
    def from_domain(
        cls,
        account: AggregatorAccount,
        link: BankLink,
        institution: Institution,
    ) -> AccountViewDTO:
        return cls(
            id=account.account_id,
            available_balance=account.available_balance,
            current_balance=account.current_balance or Decimal("0"),
            institution_id=institution.institution_id,
            institution_name=institution.name,
            name=account.name,
            official_name=account.official_name,
            mask=account.mask,
            type=account.type,
            subtype=account.subtype,
            link_id=link.id,
            shareable_id=link.shareable_id,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "available_balance": (
                str(self.available_balance)
                if self.available_balance is not None
                else None
            ),
            "current_balance": str(self.current_balance),
            "institution_id": self.institution_id,
            "institution_name": self.institution_name,
            "name": self.name,
            "official_name": self.official_name,
            "mask": self.mask,
            "type": self.type,
            "subtype": self.subtype,
            "link_id": self.link_id,
            "shareable_id": self.shareable_id,
        }
