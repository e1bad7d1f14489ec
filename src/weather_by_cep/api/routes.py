"""
API routes - Weather lookup endpoint.

This module defines the HTTP endpoint:
- GET /weather/{cep} - Current temperature for a postal code

Every response, success or failure, is a single JSON object.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from weather_by_cep.api.dependencies import get_weather_service
from weather_by_cep.api.models import ErrorResponse, WeatherResponse
from weather_by_cep.domain.exceptions import InvalidZipcode, UpstreamError, ZipcodeNotFound
from weather_by_cep.domain.weather import WeatherByCepService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["weather"])

INVALID_ZIPCODE_MESSAGE = "invalid zipcode"
ZIPCODE_NOT_FOUND_MESSAGE = "can not find zipcode"
INTERNAL_ERROR_MESSAGE = "internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error body in the {"message": ...} shape."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


@router.get(
    "/weather/{cep:path}",
    response_model=WeatherResponse,
    responses={
        404: {"model": ErrorResponse, "description": "CEP not found"},
        422: {"model": ErrorResponse, "description": "Malformed CEP"},
        500: {"model": ErrorResponse, "description": "Upstream lookup failed"},
    },
    summary="Current temperature for a CEP",
    description="Resolve a Brazilian postal code to its city and return the "
    "city's current temperature in Celsius, Fahrenheit and Kelvin.",
)
async def get_weather_by_cep(
    cep: str,
    service: WeatherByCepService = Depends(get_weather_service),
) -> WeatherResponse | JSONResponse:
    """
    Current temperature for a postal code.

    - **cep**: 8-digit CEP, hyphen allowed ("01310-100" or "01310100")
    """
    try:
        result = await service.get_weather(cep)
    except InvalidZipcode:
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_ZIPCODE_MESSAGE)
    except ZipcodeNotFound:
        return error_response(status.HTTP_404_NOT_FOUND, ZIPCODE_NOT_FOUND_MESSAGE)
    except UpstreamError as exc:
        # Upstream detail stays in the logs, never in the response body
        logger.error("Lookup for CEP %s failed: %s", cep, exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    return WeatherResponse.from_result(result)


@router.get("/weather/", response_model=WeatherResponse, include_in_schema=False)
async def get_weather_without_cep(
    service: WeatherByCepService = Depends(get_weather_service),
) -> WeatherResponse | JSONResponse:
    """Empty CEP segment, answered like any other malformed CEP."""
    return await get_weather_by_cep("", service)
