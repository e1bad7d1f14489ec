"""
WeatherAPI adapter - Implements WeatherResolver protocol.

Queries ``{base_url}/current.json`` for the current conditions of a city.
"""

import httpx
from pydantic import BaseModel, ValidationError

from weather_by_cep.domain.exceptions import WeatherLookupError
from weather_by_cep.domain.ports import TemperatureReading

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"


class CurrentConditions(BaseModel):
    temp_c: float


class CurrentWeatherPayload(BaseModel):
    """Subset of the WeatherAPI current.json body this service reads."""

    current: CurrentConditions


class WeatherAPIResolver:
    """
    Implements WeatherResolver protocol over the WeatherAPI HTTP API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self.client = client
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def resolve(self, city: str) -> TemperatureReading:
        """
        Fetch the current temperature in Celsius for a city.

        The city goes out as the ``q`` query parameter; httpx percent-encodes
        it as UTF-8 so names like "São Paulo" arrive intact.

        Raises:
            WeatherLookupError: On transport error, non-200 status or
                an unreadable body
        """
        # The API key is a query parameter; messages carry the error text, never the URL
        try:
            response = await self.client.get(
                f"{self.base_url}/current.json",
                params={"key": self.api_key, "q": city},
            )
        except httpx.HTTPError as exc:
            raise WeatherLookupError(
                f"failed to fetch weather for {city}: {type(exc).__name__}: {exc}"
            ) from exc

        if response.status_code != httpx.codes.OK:
            raise WeatherLookupError(f"WeatherAPI returned status {response.status_code}")

        try:
            payload = CurrentWeatherPayload.model_validate_json(response.content)
        except ValidationError as exc:
            raise WeatherLookupError("failed to decode WeatherAPI response") from exc

        return TemperatureReading(celsius=payload.current.temp_c)
