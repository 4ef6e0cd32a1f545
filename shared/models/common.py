"""Common Pydantic models shared across services."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictStr

# Exactly eight ASCII digits, no separators.
CEP_PATTERN = re.compile(r"^\d{8}$", re.ASCII)


def is_valid_cep(value: str) -> bool:
    """Check a CEP against the eight-digit pattern.

    No normalization is applied: "29902-555" or " 29902555" are rejected.

    Args:
        value: Raw CEP as received from the caller

    Returns:
        True if the CEP is exactly eight ASCII digits
    """
    if not isinstance(value, str):
        return False
    return CEP_PATTERN.fullmatch(value) is not None


class HealthStatus(str, Enum):
    """Health status enum."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class CepRequest(BaseModel):
    """Inbound payload accepted by the edge gateway."""

    cep: StrictStr = Field("", description="Brazilian postal code, 8 digits")


class TemperatureResult(BaseModel):
    """Current temperature for a city in three scales."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    city: str = Field(..., description="City name as returned by the directory")
    temp_c: float = Field(..., alias="temp_C", description="Temperature in Celsius")
    temp_f: float = Field(..., alias="temp_F", description="Temperature in Fahrenheit")
    temp_k: float = Field(..., alias="temp_K", description="Temperature in Kelvin")

    def to_response(self) -> dict:
        """Serialize using the wire field names."""
        return self.model_dump(by_alias=True)


class ErrorResponse(BaseModel):
    """The only body shape returned on failure."""

    error: str = Field(..., description="Error message")


class ServiceInfo(BaseModel):
    """Service information model."""

    model_config = ConfigDict(use_enum_values=True)

    status: HealthStatus = Field(..., description="Service health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
