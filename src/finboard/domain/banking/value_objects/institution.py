"""Financial institution value object."""

from pydantic import BaseModel, ConfigDict, Field


class Institution(BaseModel):
    """Display metadata for a financial institution."""

    institution_id: str = Field(..., min_length=1)
    name: str
    country_codes: tuple[str, ...] = ()
    products: tuple[str, ...] = ()
    url: str | None = None
    logo: str | None = Field(default=None, description="Base64 encoded PNG")
    primary_color: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
