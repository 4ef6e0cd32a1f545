"""Celsius to Fahrenheit/Kelvin conversion."""

from typing import NamedTuple

from shared.models import TemperatureResult

KELVIN_OFFSET = 273.15


class ConvertedTemperature(NamedTuple):
    celsius: float
    fahrenheit: float
    kelvin: float


def convert_celsius(celsius: float) -> ConvertedTemperature:
    """Derive Fahrenheit and Kelvin from one Celsius reading.

    Both values come straight from ``celsius``; nothing is rounded.
    """
    return ConvertedTemperature(
        celsius=celsius,
        fahrenheit=celsius * 1.8 + 32,
        kelvin=celsius + KELVIN_OFFSET,
    )


def to_temperature_result(city: str, celsius: float) -> TemperatureResult:
    converted = convert_celsius(celsius)
    return TemperatureResult(
        city=city,
        temp_c=converted.celsius,
        temp_f=converted.fahrenheit,
        temp_k=converted.kelvin,
    )
