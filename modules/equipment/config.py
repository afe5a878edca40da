"""Client settings for the equipment tracker."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from utils.settingsmanager import SettingsManager

DEFAULT_SETTINGS = {
    "api_base_url": "http://localhost:3000",
    "request_timeout": 10.0,
    "toast_duration_ms": 4500,
}


class EquipmentClientSettings(BaseModel):
    api_base_url: str = DEFAULT_SETTINGS["api_base_url"]
    request_timeout: float = Field(default=DEFAULT_SETTINGS["request_timeout"], gt=0)
    toast_duration_ms: int = Field(default=DEFAULT_SETTINGS["toast_duration_ms"], ge=0)

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("api_base_url is required")
        return value.rstrip("/")


def load_settings(filename: str = "settings.json") -> EquipmentClientSettings:
    manager = SettingsManager(filename, defaults=DEFAULT_SETTINGS)
    return EquipmentClientSettings.model_validate(manager.as_dict())


__all__ = ["DEFAULT_SETTINGS", "EquipmentClientSettings", "load_settings"]
