from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from app.definitions.data_sources import UnitSystem


class Coordinates(BaseModel):
    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")


class WeatherDescription(BaseModel):
    main: str = Field(..., description="Condition category (Rain, Clear, ...)")
    description: str = Field(..., description="Human readable description")
    icon: str = Field(..., description="Provider icon identifier")


class MainReadings(BaseModel):
    temp: float = Field(..., description="Temperature")
    feels_like: float = Field(..., description="Feels like temperature")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")
    pressure: int = Field(..., description="Atmospheric pressure (hPa)")


class Wind(BaseModel):
    speed: Optional[float] = Field(None, description="Wind speed, m/s (metric) or mph (imperial)")


class CountryInfo(BaseModel):
    country: str = Field(..., description="ISO country code")


class UpstreamCurrentConditions(BaseModel):
    name: str = Field(..., description="Location name")
    sys: CountryInfo
    coord: Coordinates
    main: MainReadings
    visibility: Optional[int] = Field(None, description="Visibility in meters")
    wind: Wind = Field(default_factory=Wind)
    weather: List[WeatherDescription] = Field(..., min_length=1)

    @property
    def primary_weather(self) -> WeatherDescription:
        return self.weather[0]


class ForecastReadings(BaseModel):
    temp: float = Field(..., description="Temperature")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")


class UpstreamForecastEntry(BaseModel):
    dt: int = Field(..., description="Unix timestamp (seconds)")
    main: ForecastReadings
    weather: List[WeatherDescription] = Field(..., min_length=1)
    wind: Wind = Field(default_factory=Wind)
    pop: float = Field(0.0, description="Probability of precipitation (0.0-1.0)")

    @property
    def primary_weather(self) -> WeatherDescription:
        return self.weather[0]


class UpstreamForecast(BaseModel):
    """
    Forecast list kept raw; entries are validated only once sliced.
    """

    entries: List[Dict[str, Any]] = Field(default_factory=list, alias="list")

    def leading_entries(self, limit: int) -> List[UpstreamForecastEntry]:
        return [
            UpstreamForecastEntry.model_validate(entry)
            for entry in self.entries[:limit]
        ]


class UpstreamUVIndex(BaseModel):
    value: Optional[float] = Field(None, description="UV index")


class WeatherAggregate(BaseModel):
    """Results of the three upstream calls for one request."""

    units: UnitSystem
    current: UpstreamCurrentConditions
    forecast: List[UpstreamForecastEntry] = Field(default_factory=list)
    uv_index: Optional[float] = None
