"""WeatherAPI adapter - current temperature lookups."""

from .client import WeatherAPIResolver

__all__ = ["WeatherAPIResolver"]
