"""Weather service exceptions."""

from .common import (
    WeatherServiceException,
    MissingParameterError,
    InvalidParameterError,
    MisconfiguredError,
    UpstreamUnauthorizedError,
    UpstreamNotFoundError,
    UpstreamRateLimitedError,
    UpstreamServiceError,
    TransportFailureError,
)

__all__ = [
    "WeatherServiceException",
    "MissingParameterError",
    "InvalidParameterError",
    "MisconfiguredError",
    "UpstreamUnauthorizedError",
    "UpstreamNotFoundError",
    "UpstreamRateLimitedError",
    "UpstreamServiceError",
    "TransportFailureError",
]
