"""Settings Route — exposes the configured asset classes to the page.

Invariants:
    - GET /settings returns {"assetClasses": {label: description}}; keys are the labels
"""

from fastapi import APIRouter, Depends

from pricebook.api.routes import API_PREFIX
from pricebook.config import Settings, get_settings
from pricebook.schemas.data_point import AppSettingsResponse

router = APIRouter(prefix=f"{API_PREFIX}/settings", tags=["settings"])


@router.get("", response_model=AppSettingsResponse)
async def read_settings(settings: Settings = Depends(get_settings)):
    return AppSettingsResponse(asset_classes=dict(settings.asset_classes))
