"""Transfer transaction value object."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from finboard.domain.shared.time import ensure_tz_aware


class TransferTransaction(BaseModel):
    """A transfer between two bank links, recorded in the local store.

    Whether the transfer is a debit or a credit depends on which link the
    caller is looking at: it is a debit for the sending link and a credit
    for every other link.
    """

    id: str = Field(..., min_length=1)
    name: str
    amount: Decimal
    created_at: datetime
    channel: str | None = None
    category: str | None = None
    sender_bank_id: str
    receiver_bank_id: str | None = None
    sender_id: str | None = None
    receiver_id: str | None = None
    email: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return str(value)

    @property
    def date(self) -> str:
        """Creation time as an ISO string (UTC if stored naive)."""
        return ensure_tz_aware(self.created_at).isoformat()

    def direction_for(self, link_id: str) -> str:
        return "debit" if self.sender_bank_id == link_id else "credit"
