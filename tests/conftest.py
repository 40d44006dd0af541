"""
Common test fixtures and configuration.
"""

import copy
from typing import Any, Dict, List

import httpx
import pytest

from app.services.external_api import OpenWeatherClient

TEST_API_KEY = "0123456789abcdef0123456789abcdef"
TEST_BASE_URL = "https://owm.test/data/2.5"

CURRENT_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 804, "main": "Clouds", "description": "overcast clouds", "icon": "04d"}
    ],
    "main": {
        "temp": 15.6,
        "feels_like": 14.5,
        "temp_min": 14.1,
        "temp_max": 16.8,
        "pressure": 1012,
        "humidity": 72,
    },
    "visibility": 10000,
    "wind": {"speed": 10, "deg": 240},
    "dt": 1700000000,
    "sys": {"country": "GB", "sunrise": 1699945000, "sunset": 1699977000},
    "name": "London",
    "cod": 200,
}


def forecast_entry(index: int) -> Dict[str, Any]:
    return {
        "dt": 1700000000 + index * 10800,
        "main": {
            "temp": 14.5 + index,
            "feels_like": 13.0 + index,
            "pressure": 1011,
            "humidity": 70 + index,
        },
        "weather": [
            {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}
        ],
        "wind": {"speed": 4.2, "deg": 200},
        "pop": 0.35,
        "dt_txt": "2023-11-14 22:00:00",
    }


FORECAST_PAYLOAD = {
    "cod": "200",
    "cnt": 40,
    "list": [forecast_entry(i) for i in range(40)],
    "city": {"name": "London", "country": "GB"},
}

UV_PAYLOAD = {"lat": 51.5085, "lon": -0.1257, "date_iso": "2023-11-14T12:00:00Z", "value": 2.6}


class UpstreamStub:
    """
    Programmable stand-in for the OpenWeatherMap endpoints.

    Each endpoint maps to a (status, body) pair or an exception to raise.
    Every request made is recorded.
    """

    def __init__(self):
        self.routes: Dict[str, Any] = {
            "weather": (200, copy.deepcopy(CURRENT_PAYLOAD)),
            "forecast": (200, copy.deepcopy(FORECAST_PAYLOAD)),
            "uvi": (200, copy.deepcopy(UV_PAYLOAD)),
        }
        self.requests: List[httpx.Request] = []

    def set(self, endpoint: str, outcome: Any) -> None:
        self.routes[endpoint] = outcome

    def calls(self, endpoint: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(f"/{endpoint}")]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        outcome = self.routes.get(endpoint, (404, {"cod": "404", "message": "unknown endpoint"}))
        if isinstance(outcome, Exception):
            raise outcome
        status_code, body = outcome
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream():
    """Upstream stub answering every endpoint successfully by default."""
    return UpstreamStub()


@pytest.fixture
async def weather_client(upstream):
    """
    OpenWeatherClient wired to the upstream stub.

    Yields:
        OpenWeatherClient: Client with a valid 32 character key
    """
    client = OpenWeatherClient(
        api_key=TEST_API_KEY,
        base_url=TEST_BASE_URL,
        timeout=5,
        transport=upstream.transport(),
    )
    yield client
    await client.close()
