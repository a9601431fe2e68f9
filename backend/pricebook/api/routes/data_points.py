"""Data Point Routes — CRUD over /dataPoints.

Invariants:
    - Bodies validated by Pydantic, field rules by core.validate_data_point (in services)
    - Domain errors propagate to the global handlers (404 / 400 envelopes)
    - Responses serialize camelCase with the provider embedded
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from pricebook.api.routes import API_PREFIX
from pricebook.core.domain_types import DataPointId
from pricebook.infrastructure.database import get_db
from pricebook.schemas.data_point import DataPointResponse, DataPointWrite
from pricebook.services import data_points as data_point_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{API_PREFIX}/dataPoints", tags=["dataPoints"])


@router.get("", response_model=list[DataPointResponse])
async def list_data_points(db: AsyncSession = Depends(get_db)):
    """All data points, most recent first. Filtering happens client-side."""
    return await data_point_service.fetch_data_points(db)


@router.post(
    "", response_model=DataPointResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_data_point(
    body: DataPointWrite, db: AsyncSession = Depends(get_db),
):
    return await data_point_service.create_data_point(db, body.to_candidate())


@router.get("/{data_point_id}", response_model=DataPointResponse)
async def get_data_point(
    data_point_id: int, db: AsyncSession = Depends(get_db),
):
    return await data_point_service.get_data_point(db, DataPointId(data_point_id))


@router.put("/{data_point_id}", response_model=DataPointResponse)
async def update_data_point(
    data_point_id: int,
    body: DataPointWrite,
    db: AsyncSession = Depends(get_db),
):
    """Replace a data point. id and date are kept."""
    return await data_point_service.update_data_point(
        db, DataPointId(data_point_id), body.to_candidate(),
    )


@router.delete(
    "/{data_point_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_data_point(
    data_point_id: int, db: AsyncSession = Depends(get_db),
):
    await data_point_service.delete_data_point(db, DataPointId(data_point_id))
