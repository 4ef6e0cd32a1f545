"""Pure transformations applied to upstream readings."""

from resolver.src.transformers.unit_converter import (
    ConvertedTemperature,
    convert_celsius,
    to_temperature_result,
)

__all__ = ["ConvertedTemperature", "convert_celsius", "to_temperature_result"]
