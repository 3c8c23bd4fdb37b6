"""Pytest config: PYTHONPATH, env for tests and fake Open-Meteo upstreams."""
import os
import sys
from pathlib import Path

import httpx
import pytest

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("RETRY_MAX_ATTEMPTS", "1")

from app.config import Settings  # noqa: E402

GEOCODING_URL = "https://geocoding.test/v1/search"
FORECAST_URL = "https://forecast.test/v1/forecast"

LONDON_GEOCODE = {
    "results": [
        {
            "name": "London",
            "latitude": 51.5074,
            "longitude": -0.1278,
            "country": "United Kingdom",
            "timezone": "Europe/London",
        }
    ]
}

LONDON_FORECAST = {
    "latitude": 51.5074,
    "longitude": -0.1278,
    "timezone": "Europe/London",
    "current": {
        "time": "2024-01-15T14:30",
        "temperature_2m": 15.5,
        "apparent_temperature": 14.2,
        "is_day": 1,
        "rain": 0,
    },
    "hourly": {
        "time": ["2024-01-15T14:00", "2024-01-15T15:00"],
        "temperature_2m": [15.5, 16.0],
    },
}


class FakeOpenMeteo:
    """
    Routes requests by host to a geocoding or forecast handler and records every request.
    A handler is a Response, an exception instance (raised), or a callable(request) -> Response.
    """

    def __init__(self, geocode=None, forecast=None):
        self.geocode = geocode if geocode is not None else httpx.Response(200, json=LONDON_GEOCODE)
        self.forecast = forecast if forecast is not None else httpx.Response(200, json=LONDON_FORECAST)
        self.requests: list[httpx.Request] = []

    def _dispatch(self, handler, request):
        if isinstance(handler, Exception):
            raise handler
        if callable(handler):
            return handler(request)
        return handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "geocoding.test":
            return self._dispatch(self.geocode, request)
        return self._dispatch(self.forecast, request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        geocoding_url=GEOCODING_URL,
        forecast_url=FORECAST_URL,
        retry_max_attempts=1,
        retry_base_delay=0,
    )


@pytest.fixture
def fake_upstream() -> FakeOpenMeteo:
    return FakeOpenMeteo()


@pytest.fixture
def upstream_factory():
    return FakeOpenMeteo


@pytest.fixture
def london_forecast() -> dict:
    return LONDON_FORECAST
