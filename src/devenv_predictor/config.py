"""Configuration management for devenv-predictor."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from devenv_predictor.logging_utils import configure_logging


class Settings(BaseSettings):
    """Process settings; predictor behavior itself is not configurable."""

    model_config = SettingsConfigDict(
        env_prefix="DEVENV_PREDICTOR_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Log level")
    log_profile: Literal["default", "cli"] = Field(default="default", description="Log output profile")


def get_settings() -> Settings:
    """Load settings from the environment and configure logging from them."""

    settings = Settings()
    configure_logging(profile=settings.log_profile, level=settings.log_level)
    return settings
