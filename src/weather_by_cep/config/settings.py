"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080

    # WeatherAPI credentials - no default, startup fails when missing
    weather_api_key: str = Field(..., min_length=1)

    # Upstream services
    viacep_base_url: str = "https://viacep.com.br/ws"
    weather_api_base_url: str = "https://api.weatherapi.com/v1"
    http_timeout_seconds: float = 10.0  # Per outbound request

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
