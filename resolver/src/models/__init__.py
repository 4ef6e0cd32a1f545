"""Upstream payload schemas and normalized lookup results."""

from resolver.src.models.upstream import (
    CurrentWeather,
    DirectoryApiResponse,
    DirectoryLookupResult,
    WeatherApiResponse,
    WeatherResult,
)

__all__ = [
    "CurrentWeather",
    "DirectoryApiResponse",
    "DirectoryLookupResult",
    "WeatherApiResponse",
    "WeatherResult",
]
