from typing import Optional

from app.definitions.data_sources import ErrorKind


class WeatherServiceException(Exception):
    """Base exception for weather service."""

    kind: ErrorKind = ErrorKind.TRANSPORT_FAILURE
    status_code: int = 500
    default_message: str = "Weather service error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MissingParameterError(WeatherServiceException):
    """Raised when the city parameter is absent or blank."""

    kind = ErrorKind.MISSING_PARAMETER
    status_code = 400
    default_message = "City parameter is required"


class InvalidParameterError(WeatherServiceException):
    """Raised when a query parameter has an unsupported value."""

    kind = ErrorKind.INVALID_PARAMETER
    status_code = 400
    default_message = "Invalid request parameter"


class MisconfiguredError(WeatherServiceException):
    """Raised when the provider credential is absent or malformed."""

    kind = ErrorKind.MISCONFIGURED
    status_code = 500
    default_message = "OpenWeatherMap API key not configured"


class UpstreamUnauthorizedError(WeatherServiceException):
    """Raised when the provider rejects the credential."""

    kind = ErrorKind.UPSTREAM_UNAUTHORIZED
    status_code = 401
    default_message = (
        "Invalid API key. Please check your OpenWeatherMap API key "
        "and ensure it's activated."
    )


class UpstreamNotFoundError(WeatherServiceException):
    """Raised when the provider does not know the requested city."""

    kind = ErrorKind.UPSTREAM_NOT_FOUND
    status_code = 404
    default_message = "City not found. Please check the spelling and try again."


class UpstreamRateLimitedError(WeatherServiceException):
    """Raised when the provider throttles the request."""

    kind = ErrorKind.UPSTREAM_RATE_LIMITED
    status_code = 429
    default_message = "API rate limit exceeded. Please try again later."


class UpstreamServiceError(WeatherServiceException):
    """Raised for any other non-success status from the provider."""

    kind = ErrorKind.UPSTREAM_OTHER

    def __init__(self, status_code: int):
        super().__init__(
            f"Weather service error ({status_code}). Please try again later.",
            status_code=status_code,
        )


class TransportFailureError(WeatherServiceException):
    """Raised when the provider cannot be reached or returns an unreadable payload."""

    kind = ErrorKind.TRANSPORT_FAILURE
    status_code = 500
    default_message = (
        "Failed to fetch weather data. Please check your internet connection "
        "and try again."
    )
