"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

import httpx
from fastapi import Depends, Request

from weather_by_cep.adapters.viacep import ViaCEPLocationResolver
from weather_by_cep.adapters.weatherapi import WeatherAPIResolver
from weather_by_cep.config.settings import Settings, get_settings
from weather_by_cep.domain.weather import WeatherByCepService


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.http_client


def get_location_resolver(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ViaCEPLocationResolver:
    """Create ViaCEP resolver bound to the shared client."""
    return ViaCEPLocationResolver(client, base_url=settings.viacep_base_url)


def get_weather_resolver(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> WeatherAPIResolver:
    """Create WeatherAPI resolver bound to the shared client."""
    return WeatherAPIResolver(
        client,
        api_key=settings.weather_api_key,
        base_url=settings.weather_api_base_url,
    )


def get_weather_service(
    location_resolver: ViaCEPLocationResolver = Depends(get_location_resolver),
    weather_resolver: WeatherAPIResolver = Depends(get_weather_resolver),
) -> WeatherByCepService:
    """
    Create weather service with injected dependencies.

    Wires together the location and weather resolvers for the domain service.
    """
    return WeatherByCepService(
        location_resolver=location_resolver,
        weather_resolver=weather_resolver,
    )
