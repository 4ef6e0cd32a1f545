"""Upstream API adapters.

Adapters raise only ``shared.models.AdapterError``.
"""

from resolver.src.adapters.directory_client import DirectoryClient
from resolver.src.adapters.weather_client import WeatherClient, parse_coordinate

__all__ = ["DirectoryClient", "WeatherClient", "parse_coordinate"]
