"""
Weather tool: async HTTP client for Open-Meteo. Input: city (validated/sanitized).
Geocodes the city, then fetches current conditions and an hourly temperature series
for the first candidate. Every failure becomes a text message; nothing is raised to the caller.
"""
import json
import logging
from typing import Any, Optional

import httpx
from langchain_core.tools import tool
from pydantic import BaseModel

from app.config import Settings, get_settings
from tools.base import ErrorKind, LookupResult, WeatherInput
from tools.input_guard import validate_city
from tools.retry import with_retry

logger = logging.getLogger(__name__)

TOOL_NAME = "getWeather"
TOOL_DESCRIPTION = "Get the current weather for a given location"

CURRENT_FIELDS = ("temperature_2m", "apparent_temperature", "is_day", "rain")
HOURLY_FIELDS = ("temperature_2m",)

NOT_FOUND_MESSAGE = "city not found, check spelling and try again"
RETRIEVAL_ERROR_PREFIX = "error retrieving weather"


class GeocodeCandidate(BaseModel):
    """One geocoding match. Only the first one returned is ever used."""
    latitude: float
    longitude: float
    name: Optional[str] = None
    country: Optional[str] = None


def _status_text(response: httpx.Response) -> str:
    """Numeric code and the standard phrase for it; the upstream status line and body are never used."""
    return f"{response.status_code} {httpx.codes.get_reason_phrase(response.status_code)}".strip()


def _transport_reason(error: httpx.RequestError) -> str:
    """Fixed phrase per error class. The exception text can carry the request URL, so it is not used."""
    if isinstance(error, httpx.TimeoutException):
        return "request timed out"
    if isinstance(error, httpx.ConnectError):
        return "connection failed"
    return "network error"


async def _http_get(client: httpx.AsyncClient, url: str, params: dict, timeout: float) -> httpx.Response:
    return await client.get(url, params=params, timeout=timeout)


def _geocode_params(city: str, settings: Settings) -> dict[str, Any]:
    return {
        "name": city,
        "count": settings.geocoding_count,
        "language": settings.geocoding_language,
        "format": "json",
    }


def _forecast_params(candidate: GeocodeCandidate, settings: Settings) -> dict[str, Any]:
    return {
        "latitude": candidate.latitude,
        "longitude": candidate.longitude,
        "hourly": ",".join(HOURLY_FIELDS),
        "models": settings.forecast_model,
        "current": ",".join(CURRENT_FIELDS),
    }


async def _run_lookup(client: httpx.AsyncClient, city: str, settings: Settings) -> LookupResult:
    fetch = with_retry(settings.retry_max_attempts, settings.retry_base_delay)(_http_get)

    geocode = await fetch(client, settings.geocoding_url, _geocode_params(city, settings), settings.http_timeout)
    if not geocode.is_success:
        logger.warning("Geocoding API returned status %s", geocode.status_code)
        return LookupResult.failure(
            ErrorKind.UPSTREAM_STATUS, f"error fetching location data: {_status_text(geocode)}"
        )

    results = geocode.json().get("results") or []
    if not results:
        logger.info("Geocoding returned no candidates")
        return LookupResult.failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

    candidate = GeocodeCandidate.model_validate(results[0])

    forecast = await fetch(
        client, settings.forecast_url, _forecast_params(candidate, settings), settings.http_timeout
    )
    if not forecast.is_success:
        logger.warning("Forecast API returned status %s", forecast.status_code)
        return LookupResult.failure(
            ErrorKind.UPSTREAM_STATUS, f"error fetching weather data: {_status_text(forecast)}"
        )

    payload = forecast.json()
    return LookupResult.success(json.dumps(payload, indent=2, ensure_ascii=False), payload)


async def lookup_weather(
    city: Any,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> LookupResult:
    """
    Guard -> geocode -> forecast -> respond. Total function: every path returns a
    LookupResult. Pass client to reuse a caller-owned httpx client (tests use a MockTransport);
    otherwise one is opened and closed for this call only.
    """
    settings = settings or get_settings()
    guard = validate_city(city)
    if not guard.ok:
        logger.info("Weather input rejected: %s", guard.error)
        return LookupResult.failure(ErrorKind.VALIDATION, guard.error)

    try:
        if client is not None:
            return await _run_lookup(client, guard.city, settings)
        async with httpx.AsyncClient(timeout=settings.http_timeout) as owned_client:
            return await _run_lookup(owned_client, guard.city, settings)
    except httpx.RequestError as e:
        logger.warning("Weather API request error: %s", type(e).__name__)
        return LookupResult.failure(
            ErrorKind.UPSTREAM_TRANSPORT, f"{RETRIEVAL_ERROR_PREFIX}: {_transport_reason(e)}"
        )
    except Exception as e:
        logger.error("Weather lookup failed: %s", type(e).__name__)
        return LookupResult.failure(ErrorKind.UNEXPECTED, f"{RETRIEVAL_ERROR_PREFIX}: unexpected error")


async def get_weather(
    city: Any,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Tool response text: pretty-printed forecast JSON, or an error sentence."""
    result = await lookup_weather(city, settings=settings, client=client)
    return result.text


@tool(TOOL_NAME, args_schema=WeatherInput)
async def weather_api(city: str) -> str:
    """
    Get the current weather for a given location. Use when the user asks about weather or temperature.
    Input: city (required). Returns forecast JSON (current conditions + hourly temperatures) or an error message.
    """
    return await get_weather(city)


def get_weather_tool():
    return weather_api
