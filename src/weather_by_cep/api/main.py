"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures logging, lifespan events and the service-level endpoints.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from weather_by_cep import __version__
from weather_by_cep.api.routes import router as weather_router
from weather_by_cep.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "weather",
        "description": "Current temperature by Brazilian postal code (CEP)",
    },
]


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Loads settings (fails fast when WEATHER_API_KEY is missing)
    - Creates the shared outbound HTTP client on startup
    - Closes the HTTP client on shutdown
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting application...")

    # One client for both upstreams; the timeout bounds each outbound request
    http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)

    # Store client in app state for dependency injection
    app.state.http_client = http_client

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await http_client.aclose()
    logger.info("HTTP client closed")


app = FastAPI(
    title="weather-by-cep",
    description="Current temperature in Celsius, Fahrenheit and Kelvin for a Brazilian CEP",
    version=__version__,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(weather_router)


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Running indicator."""
    return "weather-by-cep service is running"


@app.get("/health", response_class=PlainTextResponse)
async def health_check() -> str:
    """
    Health check endpoint.

    Returns 200 OK without touching upstream services.
    """
    return "OK"


def run() -> None:
    """Serve the application with uvicorn on HOST:PORT."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
