"""Banking schemas for API response models."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from finboard.application.dtos.banking import (
    AccountDetailDTO,
    AccountsOverviewDTO,
    AccountViewDTO,
    LinkFailure,
)
from finboard.domain.banking.value_objects import (
    ExternalTransaction,
    Institution,
    MergedTransaction,
)


class BankAccountResponse(BaseModel):
    """Response schema for a linked bank account."""

    id: str = Field(..., description="Aggregator account id")
    available_balance: Optional[Decimal] = Field(
        None,
        description="Available balance (if reported by the bank)",
    )
    current_balance: Decimal = Field(..., description="Current balance")
    institution_id: str = Field(..., description="Institution id")
    institution_name: str = Field(..., description="Institution display name")
    name: str = Field(..., description="Account name")
    official_name: Optional[str] = Field(None, description="Official account name")
    mask: Optional[str] = Field(None, description="Last digits of account number")
    type: str = Field(..., description="Account type (depository, credit, ...)")
    subtype: Optional[str] = Field(None, description="Account subtype")
    link_id: str = Field(..., description="Bank link id")
    shareable_id: Optional[str] = Field(None, description="Shareable id of the link")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "BxBXxLj1m4HMXBm9WZZmCWVbPjX16EHwv99vp",
                "available_balance": "100.00",
                "current_balance": "110.00",
                "institution_id": "ins_109508",
                "institution_name": "First Platypus Bank",
                "name": "Plaid Checking",
                "official_name": "Plaid Gold Standard 0% Interest Checking",
                "mask": "0000",
                "type": "depository",
                "subtype": "checking",
                "link_id": "b1",
                "shareable_id": "c2hhcmVhYmxl",
            },
        },
    }

    @classmethod
    def from_dto(cls, dto: AccountViewDTO) -> "BankAccountResponse":
        return cls(
            id=dto.id,
            available_balance=dto.available_balance,
            current_balance=dto.current_balance,
            institution_id=dto.institution_id,
            institution_name=dto.institution_name,
            name=dto.name,
            official_name=dto.official_name,
            mask=dto.mask,
            type=dto.type,
            subtype=dto.subtype,
            link_id=dto.link_id,
            shareable_id=dto.shareable_id,
        )


class LinkFailureResponse(BaseModel):
    """A bank link whose account could not be loaded."""

    link_id: str
    kind: str = Field(..., description="not_found, upstream_unavailable, ...")
    code: str = Field(..., description="Machine-readable error code")
    message: str

    @classmethod
    def from_dto(cls, failure: LinkFailure) -> "LinkFailureResponse":
        return cls(
            link_id=failure.link_id,
            kind=failure.kind.value,
            code=failure.code.value,
            message=failure.message,
        )


class BankAccountListResponse(BaseModel):
    """Response schema for all bank accounts of the current user."""

    data: list[BankAccountResponse] = Field(default_factory=list)
    total_banks: int = Field(..., description="Number of bank links of the user")
    total_current_balance: Decimal = Field(
        ...,
        description="Sum of current balances of the returned accounts",
    )
    errors: list[LinkFailureResponse] = Field(
        default_factory=list,
        description="Bank links that could not be loaded",
    )

    @classmethod
    def from_dto(cls, dto: AccountsOverviewDTO) -> "BankAccountListResponse":
        return cls(
            data=[BankAccountResponse.from_dto(a) for a in dto.accounts],
            total_banks=dto.total_banks,
            total_current_balance=dto.total_current_balance,
            errors=[LinkFailureResponse.from_dto(e) for e in dto.errors],
        )


class TransactionResponse(BaseModel):
    """Response schema for a merged transaction."""

    id: str
    name: str
    amount: Decimal
    date: str = Field(..., description="ISO datetime or YYYY-MM-DD")
    payment_channel: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = Field(
        None,
        description="debit/credit for transfers, payment type otherwise",
    )
    account_id: Optional[str] = None
    pending: Optional[bool] = None
    image: Optional[str] = None
    origin: str = Field(..., description="transfer or external")

    @classmethod
    def from_domain(cls, tx: MergedTransaction) -> "TransactionResponse":
        return cls(
            id=tx.id,
            name=tx.name,
            amount=tx.amount,
            date=tx.date,
            payment_channel=tx.payment_channel,
            category=tx.category,
            type=tx.type,
            account_id=tx.account_id,
            pending=tx.pending,
            image=tx.image,
            origin=tx.origin.value,
        )


class BankAccountDetailResponse(BaseModel):
    """Response schema for one bank account with its transactions."""

    data: BankAccountResponse
    transactions: list[TransactionResponse] = Field(
        default_factory=list,
        description="Transfers and external transactions, most recent first",
    )

    @classmethod
    def from_dto(cls, dto: AccountDetailDTO) -> "BankAccountDetailResponse":
        return cls(
            data=BankAccountResponse.from_dto(dto.account),
            transactions=[TransactionResponse.from_domain(t) for t in dto.transactions],
        )


class ExternalTransactionResponse(BaseModel):
    """Response schema for a transaction from the transaction source."""

    id: str
    name: str
    payment_channel: Optional[str] = None
    type: Optional[str] = None
    account_id: Optional[str] = None
    amount: Decimal
    pending: bool = False
    category: str = ""
    date: str
    image: str = ""

    @classmethod
    def from_domain(cls, tx: ExternalTransaction) -> "ExternalTransactionResponse":
        return cls.model_validate(tx.model_dump())


class TransactionListResponse(BaseModel):
    """Response schema for the transaction source of a bank link."""

    transactions: list[ExternalTransactionResponse] = Field(default_factory=list)
    total: int


class InstitutionResponse(BaseModel):
    """Response schema for institution metadata."""

    institution_id: str
    name: str
    country_codes: list[str] = Field(default_factory=list)
    products: list[str] = Field(default_factory=list)
    url: Optional[str] = None
    logo: Optional[str] = Field(None, description="Base64 encoded PNG")
    primary_color: Optional[str] = None

    @classmethod
    def from_domain(cls, institution: Institution) -> "InstitutionResponse":
        return cls(
            institution_id=institution.institution_id,
            name=institution.name,
            country_codes=list(institution.country_codes),
            products=list(institution.products),
            url=institution.url,
            logo=institution.logo,
            primary_color=institution.primary_color,
        )
