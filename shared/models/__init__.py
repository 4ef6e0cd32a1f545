"""Shared Pydantic models and error types for the CEP temperature services."""

from .common import (
    CEP_PATTERN,
    CepRequest,
    ErrorResponse,
    HealthStatus,
    ServiceInfo,
    TemperatureResult,
    is_valid_cep,
)
from .errors import AdapterError, AdapterFailure, ErrorKind, OutwardError

__all__ = [
    "CEP_PATTERN",
    "CepRequest",
    "ErrorResponse",
    "HealthStatus",
    "ServiceInfo",
    "TemperatureResult",
    "is_valid_cep",
    "AdapterError",
    "AdapterFailure",
    "ErrorKind",
    "OutwardError",
]
