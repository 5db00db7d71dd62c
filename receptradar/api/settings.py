"""Settings API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from receptradar.api.dependencies import get_settings_service
from receptradar.schemas.setting import SettingResponse, SettingValue
from receptradar.services.settings_service import SettingsService

router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


@router.get("/{key}", response_model=SettingResponse)
def get_setting(key: str, service: Annotated[SettingsService, Depends(get_settings_service)]):
    """Get a setting; unset keys have a null value."""
    return SettingResponse(key=key, value=service.get(key))


@router.put("/{key}", response_model=SettingResponse)
def put_setting(
    key: str,
    body: SettingValue,
    service: Annotated[SettingsService, Depends(get_settings_service)],
):
    service.set(key, body.value)
    return SettingResponse(key=key, value=body.value)
