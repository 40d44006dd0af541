"""
This module defines provider constants and enumerations for the application.
"""

from enum import Enum
from typing import Dict

OPENWEATHER_API_KEY_LENGTH = 32
REDACTED_API_KEY = "[API_KEY]"
MAX_CITY_LENGTH = 100

METERS_PER_MILE = 1609.34
METERS_PER_KILOMETER = 1000
MPS_TO_KMH = 3.6
DEFAULT_VISIBILITY_METERS = 10000


class UnitSystem(str, Enum):
    """Unit systems accepted by the provider."""

    IMPERIAL = "imperial"
    METRIC = "metric"


class ErrorKind(str, Enum):
    """Classification of request failures."""

    MISSING_PARAMETER = "MissingParameter"
    INVALID_PARAMETER = "InvalidParameter"
    MISCONFIGURED = "Misconfigured"
    UPSTREAM_UNAUTHORIZED = "UpstreamUnauthorized"
    UPSTREAM_NOT_FOUND = "UpstreamNotFound"
    UPSTREAM_RATE_LIMITED = "UpstreamRateLimited"
    UPSTREAM_OTHER = "UpstreamOther"
    TRANSPORT_FAILURE = "TransportFailure"


WIND_UNITS: Dict[UnitSystem, str] = {
    UnitSystem.IMPERIAL: "mph",
    UnitSystem.METRIC: "km/h",
}

VISIBILITY_UNITS: Dict[UnitSystem, str] = {
    UnitSystem.IMPERIAL: "mi",
    UnitSystem.METRIC: "km",
}

TEMPERATURE_UNITS: Dict[UnitSystem, str] = {
    UnitSystem.IMPERIAL: "°F",
    UnitSystem.METRIC: "°C",
}
