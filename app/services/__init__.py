"""
Services package initialization.
"""

from app.services.external_api import OpenWeatherClient
from app.services.weather_service import WeatherService

__all__ = [
    "OpenWeatherClient",
    "WeatherService",
]
