from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LoggingConfig
from .models import AppInfo


class Settings(BaseSettings):
    """Settings for the command-line tool.

    The library functions never read these; they only provide CLI defaults.
    """

    app: AppInfo = AppInfo()
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    platform: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="APPWHERE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    return Settings()


__all__ = [
    "AppInfo",
    "Settings",
    "get_settings",
]
