"""
This module defines the routes of the weather lookup API.
"""

from datetime import datetime, UTC
from typing import Optional

from fastapi import APIRouter, Query, Request, Depends
from fastapi.responses import JSONResponse

from app.api.crud import WeatherCRUD
from app.config import get_settings
from app.definitions.data_sources import MAX_CITY_LENGTH, UnitSystem
from app.exceptions import (
    InvalidParameterError,
    TransportFailureError,
    WeatherServiceException,
)
from app.schemas.common import ErrorResponse, HealthResponse
from app.schemas.weather import NormalizedWeatherRecord
from app.services.external_api import OpenWeatherClient
from app.services.weather_service import WeatherService
from app.utils.dependencies import get_weather_client, get_weather_service
from app.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

router = APIRouter(tags=["weather"])

ERROR_RESPONSES = {
    status: {"model": ErrorResponse} for status in (400, 401, 404, 429, 500)
}


def error_response(exc: WeatherServiceException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@router.get(
    "/weather",
    response_model=NormalizedWeatherRecord,
    responses=ERROR_RESPONSES,
)
async def get_weather(
    request: Request,
    city: Optional[str] = Query(None, description="City name"),
    units: str = Query(
        UnitSystem.IMPERIAL.value, description="Unit system: imperial or metric"
    ),
    weather_service: WeatherService = Depends(get_weather_service),
):
    """
    Get current conditions, UV index and a 24-hour forecast for a city.

    Forecast and UV index are best-effort: when they are unavailable the
    response carries an empty forecast and a UV index of 0. An unusable
    provider key is reported before any parameter is validated.
    """
    request_id = getattr(request.state, "request_id", None)
    try:
        weather_service.api_client.ensure_configured()

        try:
            unit_system = UnitSystem(units)
        except ValueError as e:
            raise InvalidParameterError(
                "Units parameter must be 'imperial' or 'metric'"
            ) from e

        if city and len(city.strip()) > MAX_CITY_LENGTH:
            raise InvalidParameterError(
                f"City parameter must be at most {MAX_CITY_LENGTH} characters"
            )

        aggregate = await weather_service.get_weather(city, unit_system)
        return WeatherCRUD.transform_internal(aggregate)

    except WeatherServiceException as e:
        logger.warning(
            "Weather request failed",
            extra={
                "event": "weather_error",
                "city": city,
                "error_kind": e.kind.value,
                "status_code": e.status_code,
                "request_id": request_id,
            },
        )
        return error_response(e)
    except Exception as e:
        logger.error(
            "Error getting weather",
            extra={
                "event": "api_error",
                "city": city,
                "error": str(e),
                "error_type": type(e).__name__,
                "request_id": request_id,
            },
        )
        return error_response(TransportFailureError())


@router.get("/health", response_model=HealthResponse)
async def health_check(
    api_client: OpenWeatherClient = Depends(get_weather_client),
):
    """
    Health check endpoint that reports whether the provider key is usable.
    """
    credential_status = api_client.credential_status()

    return HealthResponse(
        status="healthy" if credential_status == "configured" else "degraded",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
        services={"openweather_api_key": credential_status},
    )
