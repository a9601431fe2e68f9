"""Provider Persistence — list and create the providers data points reference.

Invariants:
    - A name clash is always DuplicateProviderError (409), whether caught by the
      pre-check or by the unique index when two creates race
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pricebook.core.errors import DuplicateProviderError
from pricebook.models.provider import Provider

logger = logging.getLogger(__name__)


async def fetch_providers(db: AsyncSession) -> list[Provider]:
    """All providers, ordered by display name."""
    result = await db.execute(select(Provider).order_by(Provider.name))
    return list(result.scalars().all())


async def create_provider(db: AsyncSession, name: str) -> Provider:
    existing = await db.execute(select(Provider.id).where(Provider.name == name))
    if existing.scalar_one_or_none() is not None:
        raise DuplicateProviderError(name)
    provider = Provider(name=name)
    db.add(provider)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateProviderError(name)
    logger.info("Provider created", extra={"provider_id": provider.id})
    return provider
