"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import Optional, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application settings
    app_name: str = "Weather Lookup API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # OpenWeatherMap settings
    openweather_api_key: Optional[str] = None
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    openweather_timeout: float = 10.0

    # Forecast settings (3-hour entries, 8 entries = 24 hours)
    forecast_entry_limit: int = 8

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["GET"]
    cors_allow_headers: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
