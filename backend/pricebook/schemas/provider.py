"""Provider Schemas — provider creation and public-facing provider data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProviderCreate(BaseModel):
    """Provider creation — validates name length and whitespace."""
    name: str = Field(min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProviderResponse(BaseModel):
    """Provider response — id and display name."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
