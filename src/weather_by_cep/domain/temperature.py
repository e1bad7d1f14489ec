"""
Temperature scale conversions.

Kelvin uses the integer offset 273 rather than 273.15 so that reported
values match the existing public API.
"""

KELVIN_OFFSET = 273


def celsius_to_fahrenheit(celsius: float) -> float:
    """F = C * 1.8 + 32"""
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    """K = C + 273"""
    return celsius + KELVIN_OFFSET
