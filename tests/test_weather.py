"""Tests for the weather providers."""

import random

import httpx
import pytest

from demo_server.errors import WeatherServiceError
from demo_server.weather import (
    CONDITIONS,
    OpenMeteoWeather,
    SimulatedWeather,
    Weather,
    interpret_wmo_code,
    normalize_city,
)


@pytest.mark.asyncio
async def test_simulated_weather_stays_in_bounds():
    provider = SimulatedWeather(random.Random(0))
    for _ in range(500):
        weather = await provider.current("Paris")
        assert 10 <= weather.temperature <= 39
        assert 0 <= weather.wind <= 19
        assert weather.condition in CONDITIONS


@pytest.mark.asyncio
async def test_simulated_weather_is_deterministic_with_seed():
    first = await SimulatedWeather(random.Random(7)).current("Oslo")
    second = await SimulatedWeather(random.Random(7)).current("Oslo")
    assert first == second


def test_format_without_country():
    text = Weather(city="Paris", temperature=21, condition="Sunny", wind=5).format()
    assert text == "Weather in Paris:\n🌡️ Temperature: 21°C\n☁️ Condition: Sunny\n💨 Wind: 5 km/h"


def test_format_with_country():
    text = Weather("Paris", 12.5, "Rain", 7.2, country="France").format()
    assert text.startswith("Weather in Paris (France):")
    assert "12.5°C" in text
    assert "7.2 km/h" in text


def test_normalize_city():
    assert normalize_city("  Paris ") == "Paris"
    with pytest.raises(ValueError, match="empty"):
        normalize_city("   ")
    with pytest.raises(ValueError, match="100"):
        normalize_city("x" * 101)


@pytest.mark.parametrize(
    "code, condition",
    [(0, "Clear sky"), (2, "Partly cloudy"), (48, "Foggy"), (82, "Rain showers"), (99, "Thunderstorm"), (42, "Unknown")],
)
def test_interpret_wmo_code(code, condition):
    assert interpret_wmo_code(code) == condition


def _open_meteo_transport(geocode: dict, forecast: dict, status: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "geocoding-api.open-meteo.com":
            return httpx.Response(status, json=geocode)
        return httpx.Response(status, json=forecast)

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_open_meteo_success():
    transport = _open_meteo_transport(
        {"results": [{"latitude": 48.85, "longitude": 2.35, "country": "France"}]},
        {"current": {"temperature_2m": 17.3, "weather_code": 3, "wind_speed_10m": 11.0}},
    )
    weather = await OpenMeteoWeather(transport=transport).current("Paris")
    assert weather == Weather("Paris", 17.3, "Overcast", 11.0, country="France")


@pytest.mark.asyncio
async def test_open_meteo_unknown_city():
    transport = _open_meteo_transport({"results": []}, {})
    with pytest.raises(WeatherServiceError, match="City not found: Atlantis"):
        await OpenMeteoWeather(transport=transport).current("Atlantis")


@pytest.mark.asyncio
async def test_open_meteo_http_error():
    transport = _open_meteo_transport({}, {}, status=503)
    with pytest.raises(WeatherServiceError, match="HTTP 503"):
        await OpenMeteoWeather(transport=transport).current("Paris")


@pytest.mark.asyncio
async def test_open_meteo_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    provider = OpenMeteoWeather(transport=httpx.MockTransport(handler))
    with pytest.raises(WeatherServiceError, match="Network error"):
        await provider.current("Paris")


@pytest.mark.asyncio
async def test_open_meteo_non_json_body():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"<html>"))
    with pytest.raises(WeatherServiceError, match="invalid JSON"):
        await OpenMeteoWeather(transport=transport).current("Paris")


@pytest.mark.asyncio
async def test_open_meteo_geocode_without_coordinates():
    transport = _open_meteo_transport({"results": [{"name": "X"}]}, {})
    with pytest.raises(WeatherServiceError, match="Malformed geocoding result for X"):
        await OpenMeteoWeather(transport=transport).current("X")


@pytest.mark.asyncio
async def test_open_meteo_incomplete_current_block():
    transport = _open_meteo_transport(
        {"results": [{"latitude": 1.0, "longitude": 2.0}]},
        {"current": {"temperature_2m": 12.0}},
    )
    with pytest.raises(WeatherServiceError, match="Malformed weather data for Paris"):
        await OpenMeteoWeather(transport=transport).current("Paris")
