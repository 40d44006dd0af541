import math
from typing import Optional

from app.definitions.data_sources import (
    DEFAULT_VISIBILITY_METERS,
    METERS_PER_KILOMETER,
    METERS_PER_MILE,
    MPS_TO_KMH,
    TEMPERATURE_UNITS,
    VISIBILITY_UNITS,
    WIND_UNITS,
    UnitSystem,
)
from app.models.weather import UpstreamForecastEntry, WeatherAggregate
from app.schemas.weather import HourlyForecast, NormalizedWeatherRecord


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves towards positive infinity.
    """
    return int(math.floor(value + 0.5))


class WeatherCRUD:
    """
    Transforms aggregated upstream data into the normalized weather record.

    Unit handling:
    - Wind speed is already mph under imperial; under metric it arrives in
      m/s and is converted to km/h
    - Visibility arrives in meters and is converted to miles or kilometers
    - Temperatures are passed through in the requested unit system
    """

    @staticmethod
    def convert_wind_speed(speed: Optional[float], units: UnitSystem) -> int:
        speed = speed or 0
        if units == UnitSystem.METRIC:
            return round_half_up(speed * MPS_TO_KMH)
        return round_half_up(speed)

    @staticmethod
    def convert_visibility(meters: Optional[int], units: UnitSystem) -> int:
        meters = meters or DEFAULT_VISIBILITY_METERS
        divisor = METERS_PER_MILE if units == UnitSystem.IMPERIAL else METERS_PER_KILOMETER
        return round_half_up(meters / divisor)

    @staticmethod
    def transform_hourly(entry: UpstreamForecastEntry, units: UnitSystem) -> HourlyForecast:
        weather = entry.primary_weather
        return HourlyForecast(
            time=entry.dt,
            temperature=round_half_up(entry.main.temp),
            condition=weather.main,
            description=weather.description,
            icon_code=weather.icon,
            humidity=entry.main.humidity,
            wind_speed=WeatherCRUD.convert_wind_speed(entry.wind.speed, units),
            precipitation=entry.pop * 100,
        )

    @staticmethod
    def transform_internal(aggregate: WeatherAggregate) -> NormalizedWeatherRecord:
        """
        Transform the aggregate of the three upstream calls into the API format.
        """
        units = aggregate.units
        current = aggregate.current
        weather = current.primary_weather

        return NormalizedWeatherRecord(
            city=current.name,
            country=current.sys.country,
            temperature=round_half_up(current.main.temp),
            feels_like=round_half_up(current.main.feels_like),
            condition=weather.main,
            description=weather.description,
            icon=weather.main.lower(),
            icon_code=weather.icon,
            humidity=current.main.humidity,
            wind_speed=WeatherCRUD.convert_wind_speed(current.wind.speed, units),
            wind_unit=WIND_UNITS[units],
            visibility=WeatherCRUD.convert_visibility(current.visibility, units),
            visibility_unit=VISIBILITY_UNITS[units],
            pressure=current.main.pressure,
            uv_index=max(0, round_half_up(aggregate.uv_index or 0)),
            units=units,
            temp_unit=TEMPERATURE_UNITS[units],
            hourly_forecast=[
                WeatherCRUD.transform_hourly(entry, units)
                for entry in aggregate.forecast
            ],
        )
