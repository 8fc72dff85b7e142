"""Bank link value object."""

from pydantic import BaseModel, ConfigDict, Field

from finboard.domain.shared.value_objects import SecureString


class BankLink(BaseModel):
    """
    Value object representing a stored link between a user and a bank item.

    The access token is the aggregator credential for the linked item. It
    is created when the user links a bank and only read here.
    """

    id: str = Field(..., min_length=1, description="Local link identifier")
    user_id: str = Field(..., min_length=1, description="Owning user")
    access_token: SecureString = Field(..., description="Aggregator access token")
    shareable_id: str | None = Field(
        default=None,
        description="Public identifier used for transfers between users",
    )
    account_id: str | None = Field(
        default=None,
        description="Aggregator account id captured when linking",
    )
    institution_id: str | None = Field(default=None)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    def __str__(self) -> str:
        return f"BankLink({self.id}, user={self.user_id})"
