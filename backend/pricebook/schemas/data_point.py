"""Data Point Schemas — Pydantic models for the /dataPoints wire contract.

Invariants:
    - DataPointWrite never carries id or date (server-assigned)
    - provider reference accepted as providerId or provider (form string / object)
    - Responses embed the joined provider and serialize with camelCase aliases

Design Decisions:
    - Loose types on write (str | float for prices, object for provider): the
      field rules live in core.data_points.validate_data_point so the server and
      the page controller report identical messages
    - extra="ignore": PUT bodies carry the full draft (id, date, provider object)
    - asset_class / quarter bounded at the column widths so oversize values are a
      400 here instead of a storage error
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pricebook.schemas.provider import ProviderResponse


class DataPointWrite(BaseModel):
    """Create/update body. Full replace semantics on PUT."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    provider_id: Any = None
    provider: Any = None
    asset_class: str | None = Field(None, max_length=50)
    quarter: str | None = Field(None, max_length=20)
    min_price: float | str | None = None
    max_price: float | str | None = None

    def to_candidate(self) -> dict:
        """Wire-form dict for core validation; providerId wins over provider."""
        reference = self.provider_id if self.provider_id is not None else self.provider
        return {
            "provider": "" if reference is None else reference,
            "assetClass": self.asset_class,
            "quarter": self.quarter,
            "minPrice": self.min_price,
            "maxPrice": self.max_price,
        }


class DataPointResponse(BaseModel):
    """Data point response — record with its provider joined."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    provider_id: int
    provider: ProviderResponse
    asset_class: str
    quarter: str
    min_price: float
    max_price: float
    date: datetime

    @field_validator("date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """SQLite drops tzinfo on read; stored values are always UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class AppSettingsResponse(BaseModel):
    """Settings exposed to the page — asset-class labels are the keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    asset_classes: dict[str, str] = Field(default_factory=dict)
