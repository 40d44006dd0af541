from typing import Optional, Dict, Any

import httpx
from pydantic import ValidationError

from app.config import get_settings
from app.definitions.data_sources import OPENWEATHER_API_KEY_LENGTH, UnitSystem
from app.exceptions import (
    MisconfiguredError,
    TransportFailureError,
    UpstreamNotFoundError,
    UpstreamRateLimitedError,
    UpstreamServiceError,
    UpstreamUnauthorizedError,
)
from app.models.weather import (
    UpstreamCurrentConditions,
    UpstreamForecast,
    UpstreamUVIndex,
)
from app.utils.logger import setup_logger, redact_secret

logger = setup_logger(__name__)
settings = get_settings()

STATUS_ERRORS = {
    401: UpstreamUnauthorizedError,
    404: UpstreamNotFoundError,
    429: UpstreamRateLimitedError,
}


class OpenWeatherClient:
    """
    Async client for the OpenWeatherMap 2.5 endpoints used by the service.

    A single httpx.AsyncClient is shared by the current conditions,
    forecast and UV index calls.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.openweather_api_key
        self.base_url = (base_url or settings.openweather_base_url).rstrip("/")
        self.client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.openweather_timeout,
            transport=transport,
        )

    async def close(self):
        await self.client.aclose()

    def ensure_configured(self) -> None:
        """
        Fail fast when the credential is absent or not a 32 character key.
        """
        if not self.api_key:
            raise MisconfiguredError()
        if len(self.api_key) != OPENWEATHER_API_KEY_LENGTH:
            raise MisconfiguredError(
                "Invalid API key format. Please check your OPENWEATHER_API_KEY."
            )

    def credential_status(self) -> str:
        try:
            self.ensure_configured()
        except MisconfiguredError:
            return "missing" if not self.api_key else "malformed"
        return "configured"

    def redact(self, text: str) -> str:
        return redact_secret(text, self.api_key)

    async def fetch_current(
        self, city: str, units: UnitSystem
    ) -> UpstreamCurrentConditions:
        data = await self._get("weather", {"q": city, "units": units.value})
        return self._parse(UpstreamCurrentConditions, data)

    async def fetch_forecast(self, city: str, units: UnitSystem) -> UpstreamForecast:
        data = await self._get("forecast", {"q": city, "units": units.value})
        return self._parse(UpstreamForecast, data)

    async def fetch_uv_index(self, lat: float, lon: float) -> UpstreamUVIndex:
        data = await self._get("uvi", {"lat": lat, "lon": lon})
        return self._parse(UpstreamUVIndex, data)

    async def _get(self, endpoint: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url}/{endpoint}"
        request_params = {**params, "appid": self.api_key}

        request = self.client.build_request("GET", url, params=request_params)
        logger.info(
            "Fetching from OpenWeatherMap",
            extra={
                "event": "api_call",
                "endpoint": endpoint,
                "url": self.redact(str(request.url)),
            },
        )

        try:
            response = await self.client.send(request)
        except httpx.HTTPError as e:
            logger.error(
                "Transport error from OpenWeatherMap",
                extra={
                    "event": "api_transport_error",
                    "endpoint": endpoint,
                    "error": self.redact(str(e)),
                    "error_type": type(e).__name__,
                },
            )
            raise TransportFailureError() from e

        if not response.is_success:
            logger.warning(
                "Error response from OpenWeatherMap",
                extra={
                    "event": "api_error",
                    "endpoint": endpoint,
                    "status_code": response.status_code,
                    "body": self.redact(response.text),
                },
            )
            error_class = STATUS_ERRORS.get(response.status_code)
            if error_class:
                raise error_class()
            raise UpstreamServiceError(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "Invalid JSON from OpenWeatherMap",
                extra={"event": "api_invalid_json", "endpoint": endpoint},
            )
            raise TransportFailureError() from e

    @staticmethod
    def _parse(model, data: Any):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(
                "Unexpected payload from OpenWeatherMap",
                extra={
                    "event": "api_invalid_payload",
                    "model": model.__name__,
                    "error_count": e.error_count(),
                },
            )
            raise TransportFailureError() from e
