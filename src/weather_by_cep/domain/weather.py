"""
Weather-by-CEP domain service - request orchestration.

This module contains the core flow of the service. Each request moves
forward through a fixed sequence of steps and stops at the first failure:

    parse -> validate -> resolve location -> resolve weather -> convert

Outcomes:
- InvalidZipcode: CEP is not 8 digits after removing hyphens (no
  outbound call is made)
- ZipcodeNotFound: postal lookup reports the CEP as unknown
- LocationLookupError / WeatherLookupError: a dependency failed
- WeatherResult: success

The location must resolve before weather is requested, so the two
outbound calls are always sequential.
"""

import logging
from dataclasses import dataclass

from .cep import is_valid_cep, normalize_cep
from .exceptions import InvalidZipcode, ZipcodeNotFound
from .ports import LocationResolver, WeatherResolver
from .temperature import celsius_to_fahrenheit, celsius_to_kelvin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherResult:
    """Current temperature in the three reported scales."""

    celsius: float
    fahrenheit: float
    kelvin: float

    @classmethod
    def from_celsius(cls, celsius: float) -> "WeatherResult":
        return cls(
            celsius=celsius,
            fahrenheit=celsius_to_fahrenheit(celsius),
            kelvin=celsius_to_kelvin(celsius),
        )


@dataclass
class WeatherByCepService:
    """
    Domain service for CEP weather lookups.

    Orchestrates validation, location resolution and weather resolution
    through the injected ports.
    """

    location_resolver: LocationResolver
    weather_resolver: WeatherResolver

    async def get_weather(self, raw_cep: str) -> WeatherResult:
        """
        Resolve the current temperature for a postal code.

        Args:
            raw_cep: CEP as received, optionally hyphenated ("01310-100")

        Returns:
            WeatherResult with Celsius, Fahrenheit and Kelvin values

        Raises:
            InvalidZipcode: If the CEP is malformed
            ZipcodeNotFound: If the postal lookup does not know the CEP
            LocationLookupError: If the postal lookup fails
            WeatherLookupError: If the weather lookup fails
        """
        cep = normalize_cep(raw_cep)
        if not is_valid_cep(cep):
            raise InvalidZipcode(raw_cep)

        location = await self.location_resolver.resolve(cep)
        if location is None:
            raise ZipcodeNotFound(cep)

        logger.debug("CEP %s resolved to %s/%s", cep, location.city, location.state)
        reading = await self.weather_resolver.resolve(location.city)
        return WeatherResult.from_celsius(reading.celsius)
