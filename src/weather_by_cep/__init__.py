"""
weather-by-cep - current temperature for a Brazilian postal code (CEP).

Resolves a CEP to a city through ViaCEP, then fetches the city's current
temperature from WeatherAPI and reports it in Celsius, Fahrenheit and Kelvin.
"""

__version__ = "0.1.0"
