"""Settings schemas."""

from pydantic import BaseModel


class SettingValue(BaseModel):
    value: str | None


class SettingResponse(BaseModel):
    key: str
    value: str | None
