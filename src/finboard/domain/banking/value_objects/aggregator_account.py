"""Aggregator account value objects."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class AggregatorAccount(BaseModel):
    """Live account data as reported by the aggregation API."""

    account_id: str = Field(..., min_length=1)
    name: str
    official_name: str | None = None
    mask: str | None = Field(default=None, description="Last digits of the number")
    type: str
    subtype: str | None = None
    available_balance: Decimal | None = None
    current_balance: Decimal | None = None
    iso_currency_code: str | None = Field(default=None, max_length=3)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_serializer("available_balance", "current_balance")
    def serialize_balance(self, value: Decimal | None) -> str | None:
        return str(value) if value is not None else None


class AccountsSnapshot(BaseModel):
    """Result of one accounts lookup for a linked item."""

    accounts: tuple[AggregatorAccount, ...] = ()
    institution_id: str | None = None
    item_id: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def primary_account(self) -> AggregatorAccount | None:
        """The first account of the item, which the dashboard displays."""
        return self.accounts[0] if self.accounts else None
