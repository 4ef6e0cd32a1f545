"""Response schemas of the upstream APIs and the normalized adapter results.

The schemas mirror the documented payloads of the postal directory
(cep.awesomeapi.com.br) and the weather forecast API (open-meteo.com).
Only the fields the adapters read are declared; everything else is ignored.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DirectoryApiResponse(BaseModel):
    """Postal directory payload for one CEP.

    The lookup fields default to an empty string: the directory answers
    unknown codes with a success status and a body that lacks the CEP echo.
    """

    model_config = ConfigDict(extra="ignore")

    cep: str = Field("", description="CEP echoed back by the directory")
    city: str = ""
    lat: str = Field("", description="Latitude as a decimal string")
    lng: str = Field("", description="Longitude as a decimal string")
    state: Optional[str] = None
    district: Optional[str] = None


class CurrentWeather(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temperature_2m: float = Field(..., description="Air temperature at 2 m, Celsius")


class WeatherApiResponse(BaseModel):
    """Forecast payload requested with ``current=temperature_2m``."""

    model_config = ConfigDict(extra="ignore")

    current: CurrentWeather


@dataclass(frozen=True)
class DirectoryLookupResult:
    city: str
    latitude: str
    longitude: str
    raw_cep: str
    state: str = ""
    district: str = ""


@dataclass(frozen=True)
class WeatherResult:
    temperature_celsius: float
