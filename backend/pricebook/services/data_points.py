"""Data Point Persistence — create, fetch-with-join, update and delete against the ORM.

Invariants:
    - date is stamped here at creation (UTC) and never changed by update
    - Every returned DataPoint has its provider loaded (no lazy IO after return)
    - Provider references are parsed and resolved before insert/update:
      InvalidProviderReferenceError (400) or ResourceNotFoundError (404),
      never a storage-layer constraint violation
    - fetch_data_points orders by date desc, id desc (stable for equal timestamps)

Design Decisions:
    - Module-level async functions taking an AsyncSession: routes stay thin and
      tests drive the functions with a SQLite session directly
    - Input is a wire-form dict (camelCase) so the same core validation runs here
      and in the page controller
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pricebook.core.data_points import parse_provider_id, validate_data_point
from pricebook.core.domain_types import DataPointId
from pricebook.core.errors import (
    DataPointValidationError, ErrorContext, ResourceNotFoundError,
)
from pricebook.models.data_point import DataPoint
from pricebook.models.provider import Provider

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check(candidate: dict) -> None:
    errors = validate_data_point(candidate)
    if errors:
        raise DataPointValidationError(errors)


async def _resolve_provider(db: AsyncSession, raw_reference: object) -> Provider:
    provider_id = parse_provider_id(raw_reference)
    provider = await db.get(Provider, provider_id)
    if provider is None:
        raise ResourceNotFoundError(
            "Provider", str(provider_id),
            context=ErrorContext(provider_id=provider_id),
        )
    return provider


async def create_data_point(db: AsyncSession, data: dict) -> DataPoint:
    """Insert a data point stamped with the current time; returns it with its provider."""
    _check(data)
    provider = await _resolve_provider(db, data.get("provider"))
    data_point = DataPoint(
        provider=provider,
        asset_class=str(data["assetClass"]).strip(),
        quarter=str(data["quarter"]).strip(),
        min_price=float(data["minPrice"]),
        max_price=float(data["maxPrice"]),
        date=_utcnow(),
    )
    db.add(data_point)
    await db.commit()
    logger.info(
        "Data point created",
        extra={"data_point_id": data_point.id, "provider_id": provider.id},
    )
    return data_point


async def fetch_data_points(db: AsyncSession) -> list[DataPoint]:
    """All data points with providers joined, most recent first."""
    result = await db.execute(
        select(DataPoint)
        .options(selectinload(DataPoint.provider))
        .order_by(DataPoint.date.desc(), DataPoint.id.desc()),
    )
    return list(result.scalars().all())


async def get_data_point(db: AsyncSession, data_point_id: DataPointId) -> DataPoint:
    """Single data point with provider, or ResourceNotFoundError."""
    result = await db.execute(
        select(DataPoint)
        .options(selectinload(DataPoint.provider))
        .where(DataPoint.id == data_point_id),
    )
    data_point = result.scalar_one_or_none()
    if data_point is None:
        raise ResourceNotFoundError(
            "DataPoint", str(data_point_id),
            context=ErrorContext(data_point_id=data_point_id),
        )
    return data_point


async def update_data_point(
    db: AsyncSession, data_point_id: DataPointId, data: dict,
) -> DataPoint:
    """Full replace of provider, asset class, quarter and prices. id/date kept."""
    data_point = await get_data_point(db, data_point_id)
    _check(data)
    provider = await _resolve_provider(db, data.get("provider"))
    data_point.provider = provider
    data_point.asset_class = str(data["assetClass"]).strip()
    data_point.quarter = str(data["quarter"]).strip()
    data_point.min_price = float(data["minPrice"])
    data_point.max_price = float(data["maxPrice"])
    await db.commit()
    logger.info(
        "Data point updated",
        extra={"data_point_id": data_point.id, "provider_id": provider.id},
    )
    return data_point


async def delete_data_point(db: AsyncSession, data_point_id: DataPointId) -> None:
    """Remove one data point; unknown ids raise without touching other rows."""
    data_point = await get_data_point(db, data_point_id)
    await db.delete(data_point)
    await db.commit()
    logger.info("Data point deleted", extra={"data_point_id": data_point_id})
