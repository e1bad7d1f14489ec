"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the value types exchanged with infrastructure and the
interfaces (ports) the domain requires from it. Adapters implement these
protocols.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Location:
    """City and two-letter state a CEP belongs to."""

    city: str
    state: str


@dataclass(frozen=True)
class TemperatureReading:
    """Current temperature reported by the weather provider."""

    celsius: float


class LocationResolver(Protocol):
    """Port interface for postal code lookups."""

    async def resolve(self, cep: str) -> Location | None:
        """
        Resolve a validated CEP to its location.

        Args:
            cep: 8-digit postal code, hyphens already removed

        Returns:
            Location if the CEP exists, None if the lookup reports it unknown

        Raises:
            LocationLookupError: Transport failure, non-200 status or
                undecodable payload
        """
        ...


class WeatherResolver(Protocol):
    """Port interface for current weather lookups."""

    async def resolve(self, city: str) -> TemperatureReading:
        """
        Fetch the current temperature for a city.

        Args:
            city: City name as returned by the location lookup (may contain
                non-ASCII characters)

        Returns:
            Current temperature reading

        Raises:
            WeatherLookupError: Transport failure, non-200 status or
                undecodable payload
        """
        ...
