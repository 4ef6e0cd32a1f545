"""Unit tests for Celsius to Fahrenheit/Kelvin conversion."""

import pytest

from resolver.src.transformers import convert_celsius, to_temperature_result


@pytest.mark.parametrize(
    "celsius",
    [-273.15, -40.0, -12.75, 0.0, 0.1, 17.3, 28.5, 36.6, 100.0, 1e6],
)
def test_conversion_formulas_hold_exactly(celsius):
    """Fahrenheit and Kelvin are derived from the same reading, unrounded."""
    converted = convert_celsius(celsius)

    assert converted.celsius == celsius
    assert converted.fahrenheit == celsius * 1.8 + 32
    assert converted.kelvin == celsius + 273.15


def test_fixed_points():
    assert convert_celsius(0.0).fahrenheit == 32.0
    assert convert_celsius(100.0).fahrenheit == 212.0
    assert convert_celsius(-40.0).fahrenheit == -40.0
    assert convert_celsius(0.0).kelvin == 273.15


def test_temperature_result_serializes_wire_names():
    result = to_temperature_result("Vitória", 28.5)

    body = result.to_response()

    assert set(body) == {"city", "temp_C", "temp_F", "temp_K"}
    assert body["city"] == "Vitória"
    assert body["temp_C"] == 28.5
    assert body["temp_F"] == pytest.approx(83.3)
    assert body["temp_K"] == pytest.approx(301.65)


def test_conversion_is_idempotent():
    assert to_temperature_result("Vitória", 28.5) == to_temperature_result("Vitória", 28.5)
