"""
This module provides the weather aggregation service.
"""

import asyncio
from typing import Optional, List

from app.config import get_settings
from app.definitions.data_sources import UnitSystem
from app.exceptions import (
    MissingParameterError,
    TransportFailureError,
    WeatherServiceException,
)
from app.models.weather import (
    UpstreamCurrentConditions,
    UpstreamForecastEntry,
    WeatherAggregate,
)
from app.services.external_api import OpenWeatherClient
from app.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


class WeatherService:
    """
    Aggregates current conditions, forecast and UV index for a city.

    Current conditions are mandatory: any failure there aborts the request.
    Forecast and UV index are best-effort and fall back to an empty list
    and no value respectively.
    """

    def __init__(self, api_client: OpenWeatherClient, forecast_entry_limit: Optional[int] = None):
        self.api_client = api_client
        self.forecast_entry_limit = (
            forecast_entry_limit
            if forecast_entry_limit is not None
            else settings.forecast_entry_limit
        )

    async def get_weather(
        self, city: Optional[str], units: UnitSystem = UnitSystem.IMPERIAL
    ) -> WeatherAggregate:
        """
        Get the aggregated upstream data for a city.
        """
        self.api_client.ensure_configured()

        city = (city or "").strip()
        if not city:
            raise MissingParameterError()

        try:
            current = await self.api_client.fetch_current(city, units)

            forecast, uv_index = await asyncio.gather(
                self._fetch_forecast(city, units),
                self._fetch_uv_index(current),
            )
        except WeatherServiceException:
            raise
        except Exception as e:
            logger.error(
                "Failed to aggregate weather",
                extra={
                    "event": "aggregation_error",
                    "city": city,
                    "error": self.api_client.redact(str(e)),
                    "error_type": type(e).__name__,
                },
            )
            raise TransportFailureError() from e

        logger.info(
            "Weather aggregated",
            extra={
                "event": "weather_aggregated",
                "city": city,
                "units": units.value,
                "forecast_entries": len(forecast),
                "uv_available": uv_index is not None,
            },
        )
        return WeatherAggregate(
            units=units, current=current, forecast=forecast, uv_index=uv_index
        )

    async def _fetch_forecast(
        self, city: str, units: UnitSystem
    ) -> List[UpstreamForecastEntry]:
        try:
            forecast = await self.api_client.fetch_forecast(city, units)
            return forecast.leading_entries(self.forecast_entry_limit)
        except Exception as e:
            logger.warning(
                "Forecast fetch failed, continuing without forecast",
                extra={
                    "event": "forecast_unavailable",
                    "city": city,
                    "error": self.api_client.redact(str(e)),
                    "error_type": type(e).__name__,
                },
            )
            return []

    async def _fetch_uv_index(
        self, current: UpstreamCurrentConditions
    ) -> Optional[float]:
        try:
            uv = await self.api_client.fetch_uv_index(
                current.coord.lat, current.coord.lon
            )
        except Exception as e:
            logger.warning(
                "UV index fetch failed, continuing without UV data",
                extra={
                    "event": "uv_unavailable",
                    "city": current.name,
                    "error": self.api_client.redact(str(e)),
                    "error_type": type(e).__name__,
                },
            )
            return None
        return uv.value
