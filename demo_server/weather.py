"""
Weather providers for the ``get_weather`` tool.

Two providers share one interface (``async current(city) -> Weather``):
  - SimulatedWeather: random readings, no network. The default.
  - OpenMeteoWeather: live readings from the Open-Meteo public API.
"""

import logging
import random
from dataclasses import dataclass
from typing import Protocol

import httpx

from demo_server.errors import WeatherServiceError

logger = logging.getLogger(__name__)

CONDITIONS = ("Sunny", "Cloudy", "Rainy", "Partly Cloudy")
MAX_CITY_LENGTH = 100

GEOCODING_API = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_API = "https://api.open-meteo.com/v1/forecast"

# WMO weather interpretation codes
WMO_CONDITIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Partly cloudy",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Drizzle",
    53: "Drizzle",
    55: "Drizzle",
    61: "Rain",
    63: "Rain",
    65: "Rain",
    71: "Snow",
    73: "Snow",
    75: "Snow",
    77: "Snow grains",
    80: "Rain showers",
    81: "Rain showers",
    82: "Rain showers",
    85: "Snow showers",
    86: "Snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Thunderstorm",
}


@dataclass(frozen=True)
class Weather:
    city: str
    temperature: float
    condition: str
    wind: float
    country: str | None = None

    def format(self) -> str:
        place = f"{self.city} ({self.country})" if self.country else self.city
        return (
            f"Weather in {place}:\n"
            f"🌡️ Temperature: {self.temperature:g}°C\n"
            f"☁️ Condition: {self.condition}\n"
            f"💨 Wind: {self.wind:g} km/h"
        )


class WeatherProvider(Protocol):
    async def current(self, city: str) -> Weather: ...


def normalize_city(city: str) -> str:
    name = city.strip()
    if not name:
        raise ValueError("City name cannot be empty")
    if len(name) > MAX_CITY_LENGTH:
        raise ValueError(f"City name cannot exceed {MAX_CITY_LENGTH} characters")
    return name


def interpret_wmo_code(code: int) -> str:
    return WMO_CONDITIONS.get(code, "Unknown")


class SimulatedWeather:
    """Random weather, not a real data source."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    async def current(self, city: str) -> Weather:
        return Weather(
            city=normalize_city(city),
            temperature=self.rng.randint(10, 39),
            condition=self.rng.choice(CONDITIONS),
            wind=self.rng.randint(0, 19),
        )


class OpenMeteoWeather:
    """Current conditions from Open-Meteo (geocode, then forecast)."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self._transport = transport

    async def current(self, city: str) -> Weather:
        name = normalize_city(city)
        logger.info("Fetching weather for %s", name)
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            latitude, longitude, country = await self._geocode(client, name)
            current = await self._forecast(client, latitude, longitude)

        try:
            return Weather(
                city=name,
                temperature=float(current["temperature_2m"]),
                condition=interpret_wmo_code(int(current["weather_code"])),
                wind=float(current["wind_speed_10m"]),
                country=country,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise WeatherServiceError(f"Malformed weather data for {name}") from e

    async def _geocode(
        self, client: httpx.AsyncClient, city: str
    ) -> tuple[float, float, str]:
        data = await self._get_json(
            client,
            GEOCODING_API,
            {"name": city, "count": 1, "language": "en", "format": "json"},
            "Geocoding",
        )
        results = data.get("results") or []
        if not results:
            raise WeatherServiceError(f"City not found: {city}")
        try:
            place = results[0]
            return float(place["latitude"]), float(place["longitude"]), place.get("country", "Unknown")
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise WeatherServiceError(f"Malformed geocoding result for {city}") from e

    async def _forecast(
        self, client: httpx.AsyncClient, latitude: float, longitude: float
    ) -> dict:
        data = await self._get_json(
            client,
            FORECAST_API,
            {
                "latitude": f"{latitude:.2f}",
                "longitude": f"{longitude:.2f}",
                "current": "temperature_2m,weather_code,wind_speed_10m",
                "temperature_unit": "celsius",
            },
            "Weather",
        )
        try:
            return data["current"]
        except KeyError:
            raise WeatherServiceError("Weather service returned no current data") from None

    async def _get_json(
        self, client: httpx.AsyncClient, url: str, params: dict, label: str
    ) -> dict:
        try:
            response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error("%s request failed: %s", label, e)
            raise WeatherServiceError(f"Network error during {label.lower()} request") from e

        if response.status_code != 200:
            raise WeatherServiceError(
                f"{label} service returned HTTP {response.status_code}"
            )
        try:
            data = response.json()
        except ValueError as e:
            raise WeatherServiceError(f"{label} service returned invalid JSON") from e
        if not isinstance(data, dict):
            raise WeatherServiceError(f"{label} service returned an unexpected payload")
        return data
