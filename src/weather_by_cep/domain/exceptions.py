"""
Domain exceptions - Semantic error types for weather lookups.

This module defines domain-specific exceptions that communicate
lookup failures without leaking infrastructure details.
"""


class WeatherByCepError(Exception):
    """Base class for weather-by-cep domain errors."""

    pass


class InvalidZipcode(WeatherByCepError):
    """CEP is not exactly 8 digits once hyphens are removed."""

    pass


class ZipcodeNotFound(WeatherByCepError):
    """CEP is well formed but the postal lookup has no such code."""

    pass


class UpstreamError(WeatherByCepError):
    """An external dependency failed (transport, status or payload)."""

    pass


class LocationLookupError(UpstreamError):
    """Postal lookup request failed."""

    pass


class WeatherLookupError(UpstreamError):
    """Weather lookup request failed."""

    pass
