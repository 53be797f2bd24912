#!/usr/bin/env python3
"""
Configuration settings for the Daily Pulse API
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config import DashboardServiceConfig, load_config


class Settings(BaseSettings):
    """Application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_title: str = "Daily Pulse API"
    api_version: str = "1.0.0"
    debug: bool = False

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    workers: int = 1
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Logging Configuration
    log_level: str = "INFO"


# Global settings instance
_settings = None


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


@lru_cache()
def get_service_config() -> DashboardServiceConfig:
    """Store and metrics configuration, read once from the environment."""
    return load_config()
