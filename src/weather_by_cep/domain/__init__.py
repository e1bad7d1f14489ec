"""
Domain layer - Pure business logic with zero framework imports.

This package contains the CEP validation, temperature conversion and
request orchestration logic. It defines its own port interfaces for the
external lookups so adapters and test doubles can be swapped freely.
"""

from .cep import is_valid_cep, normalize_cep
from .exceptions import (
    InvalidZipcode,
    LocationLookupError,
    UpstreamError,
    WeatherByCepError,
    WeatherLookupError,
    ZipcodeNotFound,
)
from .ports import Location, LocationResolver, TemperatureReading, WeatherResolver
from .temperature import celsius_to_fahrenheit, celsius_to_kelvin
from .weather import WeatherByCepService, WeatherResult

__all__ = [
    "InvalidZipcode",
    "Location",
    "LocationLookupError",
    "LocationResolver",
    "TemperatureReading",
    "UpstreamError",
    "WeatherByCepError",
    "WeatherByCepService",
    "WeatherLookupError",
    "WeatherResolver",
    "WeatherResult",
    "ZipcodeNotFound",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "is_valid_cep",
    "normalize_cep",
]
