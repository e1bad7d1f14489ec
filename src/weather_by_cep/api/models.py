"""
API response models.

Pydantic models for FastAPI response serialization and OpenAPI schema generation.
"""

from pydantic import BaseModel

from weather_by_cep.domain.weather import WeatherResult


class WeatherResponse(BaseModel):
    """Response model for a successful weather lookup."""

    temp_C: float
    temp_F: float
    temp_K: float

    @classmethod
    def from_result(cls, result: WeatherResult) -> "WeatherResponse":
        return cls(temp_C=result.celsius, temp_F=result.fahrenheit, temp_K=result.kelvin)


class ErrorResponse(BaseModel):
    """Standard error response model."""

    message: str
