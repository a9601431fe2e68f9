"""Provider Routes — list providers for the form select, create new ones."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from pricebook.api.routes import API_PREFIX
from pricebook.infrastructure.database import get_db
from pricebook.schemas.provider import ProviderCreate, ProviderResponse
from pricebook.services import providers as provider_service

router = APIRouter(prefix=f"{API_PREFIX}/providers", tags=["providers"])


@router.get("", response_model=list[ProviderResponse])
async def list_providers(db: AsyncSession = Depends(get_db)):
    return await provider_service.fetch_providers(db)


@router.post(
    "", response_model=ProviderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_provider(
    body: ProviderCreate, db: AsyncSession = Depends(get_db),
):
    return await provider_service.create_provider(db, body.name)
