"""Data Point Rules — pure validation, filtering and draft shaping for pricing records.

Invariants:
    - Records and drafts are plain dicts in wire form (camelCase keys)
    - validate_data_point never raises — returns one message per problem
    - filter_data_points preserves input order and never re-sorts
    - A price of 0 is present; only None / blank / absent counts as missing
    - NaN and infinities are "not a number", never a price

Design Decisions:
    - Dicts over ORM objects: the same functions run on API request bodies
      and on JSON the page controller fetched
    - parse_provider_id raises a domain error instead of letting the storage
      layer report a constraint violation
"""

import math
from dataclasses import dataclass

from pricebook.core.domain_types import ProviderId
from pricebook.core.errors import InvalidProviderReferenceError

DEFAULT_ASSET_CLASS = "Buyout"
DEFAULT_QUARTER = "Q2 2024"

_REQUIRED_LABELS = {
    "provider": "Provider",
    "assetClass": "Asset class",
    "quarter": "Quarter",
}
_PRICE_LABELS = {
    "minPrice": "Min price",
    "maxPrice": "Max price",
}


@dataclass
class DataPointFilters:
    """Client-side query shape. Unset (None or empty) fields match everything."""
    asset_class: str | None = None
    quarter: str | None = None
    provider: str | None = None


def default_draft() -> dict:
    """Fresh draft used when the add modal opens and after a save."""
    return {
        "provider": "",
        "assetClass": DEFAULT_ASSET_CLASS,
        "quarter": DEFAULT_QUARTER,
        "minPrice": 0,
        "maxPrice": 0,
    }


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _parse_price(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        price = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    # "nan" / "inf" parse as floats but are not prices
    return price if math.isfinite(price) else None


def validate_data_point(candidate: dict) -> list[str]:
    """Return human-readable errors for a partial record. Empty list = valid."""
    errors: list[str] = []

    for key, label in _REQUIRED_LABELS.items():
        if _is_blank(candidate.get(key)):
            errors.append(f"{label} is required")

    prices: dict[str, float] = {}
    for key, label in _PRICE_LABELS.items():
        raw = candidate.get(key)
        if _is_blank(raw):
            errors.append(f"{label} is required")
            continue
        price = _parse_price(raw)
        if price is None:
            errors.append(f"{label} must be a number")
        elif price < 0:
            errors.append(f"{label} must not be negative")
        else:
            prices[key] = price

    if len(prices) == 2 and prices["minPrice"] > prices["maxPrice"]:
        errors.append("Min price must not exceed max price")
    return errors


def provider_name(record: dict) -> str:
    """Display name of a record's provider, embedded object or bare value."""
    provider = record.get("provider")
    if isinstance(provider, dict):
        return str(provider.get("name") or "")
    if provider is None:
        return ""
    return str(provider)


def _matches(record: dict, filters: DataPointFilters) -> bool:
    if filters.asset_class and record.get("assetClass") != filters.asset_class:
        return False
    if filters.quarter and record.get("quarter") != filters.quarter:
        return False
    if filters.provider:
        needle = filters.provider.lower()
        if needle not in provider_name(record).lower():
            return False
    return True


def filter_data_points(
    records: list[dict], filters: DataPointFilters,
) -> list[dict]:
    """Records matching every set filter field (logical AND), order preserved."""
    return [r for r in records if _matches(r, filters)]


def parse_provider_id(raw_value: object) -> ProviderId:
    """Coerce a provider reference (form string, int, or embedded object) to an id."""
    if isinstance(raw_value, dict):
        raw_value = raw_value.get("id")
    if isinstance(raw_value, bool) or raw_value is None:
        raise InvalidProviderReferenceError(raw_value)
    if isinstance(raw_value, int):
        return ProviderId(raw_value)
    try:
        return ProviderId(int(str(raw_value).strip()))
    except ValueError:
        raise InvalidProviderReferenceError(raw_value)


def draft_from_record(record: dict) -> dict:
    """Load a fetched record into an editable draft (embedded provider -> id string)."""
    draft = dict(record)
    provider = record.get("provider")
    if isinstance(provider, dict):
        draft["provider"] = str(provider.get("id", ""))
    elif provider is None and record.get("providerId") is not None:
        draft["provider"] = str(record["providerId"])
    return draft


def build_submit_payload(draft: dict) -> dict:
    """Wire payload for POST/PUT: providerId as int, prices as floats.

    Assumes the draft already passed validate_data_point.
    """
    payload = dict(draft)
    payload["providerId"] = parse_provider_id(draft.get("provider"))
    payload["minPrice"] = float(draft["minPrice"])
    payload["maxPrice"] = float(draft["maxPrice"])
    return payload
