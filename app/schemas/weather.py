"""
This module defines the response schemas of the weather endpoint.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.definitions.data_sources import UnitSystem


class CamelModel(BaseModel):
    """
    Base model serialized with camelCase keys, as consumed by the browser client.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HourlyForecast(CamelModel):
    """
    One 3-hour forecast point.

    Precipitation is a percentage left unrounded; the client rounds it when
    rendering.
    """

    time: int = Field(..., description="Unix timestamp (seconds)")
    temperature: int = Field(..., description="Temperature")
    condition: str = Field(..., description="Condition category")
    description: str = Field(..., description="Condition description")
    icon_code: str = Field(..., description="Provider icon identifier")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")
    wind_speed: int = Field(..., ge=0, description="Wind speed in mph or km/h")
    precipitation: float = Field(..., description="Probability of precipitation (%)")


class NormalizedWeatherRecord(CamelModel):
    """
    Current conditions merged with the 24-hour forecast and UV index.
    """

    city: str = Field(..., description="City name")
    country: str = Field(..., description="Country code")
    temperature: int = Field(..., description="Temperature")
    feels_like: int = Field(..., description="Feels like temperature")
    condition: str = Field(..., description="Condition category")
    description: str = Field(..., description="Condition description")
    icon: str = Field(..., description="Lower-cased condition category")
    icon_code: str = Field(..., description="Provider icon identifier")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")
    wind_speed: int = Field(..., ge=0, description="Wind speed")
    wind_unit: str = Field(..., description="mph or km/h")
    visibility: int = Field(..., ge=0, description="Visibility")
    visibility_unit: str = Field(..., description="mi or km")
    pressure: int = Field(..., description="Atmospheric pressure (hPa)")
    uv_index: int = Field(
        0, ge=0, description="UV index, 0 when unavailable"
    )
    units: UnitSystem = Field(..., description="Requested unit system")
    temp_unit: str = Field(..., description="°F or °C")
    hourly_forecast: List[HourlyForecast] = Field(
        default_factory=list, description="Next 24 hours in 3-hour steps"
    )
