"""
FastAPI dependency injection providers.
"""

from fastapi import Depends, Request

from app.services.external_api import OpenWeatherClient
from app.services.weather_service import WeatherService


async def get_weather_client(request: Request) -> OpenWeatherClient:
    """
    Provide the OpenWeatherMap client created during application startup.

    Args:
        request: Incoming request, used to reach the application state

    Returns:
        OpenWeatherClient: Shared upstream client
    """
    return request.app.state.weather_client


async def get_weather_service(
    api_client: OpenWeatherClient = Depends(get_weather_client),
) -> WeatherService:
    """
    Provide a weather service bound to the shared upstream client.

    Args:
        api_client: Upstream client from dependency

    Returns:
        WeatherService: Per-request aggregation service
    """
    return WeatherService(api_client)
