"""External transaction value object."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from finboard.domain.shared.exceptions import InvalidDateError
from finboard.domain.shared.time import parse_transaction_date


def first_category(category: Any) -> str:
    """Reduce a category that may be a list (aggregator hierarchy) to one label."""
    if isinstance(category, (list, tuple)):
        return str(category[0]) if category else ""
    return "" if category is None else str(category)


class ExternalTransaction(BaseModel):
    """A transaction in the common shape shared by all transaction sources."""

    id: str = Field(..., min_length=1)
    name: str
    payment_channel: str | None = None
    type: str | None = None
    account_id: str | None = None
    amount: Decimal
    pending: bool = False
    category: str = ""
    date: str = Field(..., description="ISO datetime or YYYY-MM-DD")
    image: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v: Any) -> str:
        return first_category(v)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        try:
            parse_transaction_date(v)
        except InvalidDateError as e:
            raise ValueError(e.message) from e
        return v

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return str(value)

    @property
    def occurred_at(self) -> datetime:
        return parse_transaction_date(self.date)

    @classmethod
    def from_aggregator_payload(cls, payload: dict[str, Any]) -> ExternalTransaction:
        """Build from a raw aggregator record (``transaction_id``, ``logo_url``...).

        The payment channel doubles as ``type`` since the aggregator has no
        separate transaction type.
        """
        return cls(
            id=payload["transaction_id"],
            name=payload["name"],
            payment_channel=payload.get("payment_channel"),
            type=payload.get("payment_channel"),
            account_id=payload.get("account_id"),
            amount=payload["amount"],
            pending=bool(payload.get("pending", False)),
            category=payload.get("category"),
            date=payload["date"],
            image=payload.get("logo_url") or "",
        )
