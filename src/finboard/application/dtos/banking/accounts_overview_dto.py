"""DTOs for the multi-account overview."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from finboard.application.dtos.banking.account_view_dto import AccountViewDTO
from finboard.domain.shared.exceptions import DomainException, ErrorCode, FailureKind


@dataclass(frozen=True)
class LinkFailure:
    """A bank link whose account could not be loaded."""

    link_id: str
    kind: FailureKind
    code: ErrorCode
    message: str

    @classmethod
    def from_exception(cls, link_id: str, exc: DomainException) -> LinkFailure:
        return cls(link_id=link_id, kind=exc.kind, code=exc.code, message=exc.message)

    def to_dict(self) -> dict:
        return {
            "link_id": self.link_id,
            "kind": self.kind.value,
            "code": self.code.value,
            "message": self.message,
        }


@dataclass
class AccountsOverviewDTO:
    """Accounts of all bank links of a user plus aggregates."""

    total_banks: int = 0
    accounts: list[AccountViewDTO] = field(default_factory=list)
    errors: list[LinkFailure] = field(default_factory=list)

    @property
    def total_current_balance(self) -> Decimal:
        return sum((a.current_balance for a in self.accounts), Decimal("0"))

    @property
    def complete(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "data": [a.to_dict() for a in self.accounts],
            "total_banks": self.total_banks,
            "total_current_balance": str(self.total_current_balance),
            "errors": [e.to_dict() for e in self.errors],
        }
