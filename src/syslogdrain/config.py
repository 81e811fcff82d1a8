"""Конфігурація через pydantic-settings."""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DialectSetting = Literal["rfc5424", "heroku", "auto"]


class Settings(BaseSettings):
    """Налаштування парсера та логування."""

    syslog_dialect: DialectSetting = Field("rfc5424", alias="SYSLOG_DIALECT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(True, alias="LOG_JSON")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    @field_validator("syslog_dialect", "log_level", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("syslog_dialect", mode="before")
    @classmethod
    def _lower_dialect(cls, value: object) -> object:
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Повертає кешований екземпляр налаштувань."""

    return Settings()


__all__ = ["DialectSetting", "Settings", "get_settings"]
