"""Weather adapter: coordinates -> current temperature in Celsius."""

import math
import re

import httpx
import structlog
from opentelemetry.trace import Span
from pydantic import ValidationError

from resolver.src.models import WeatherApiResponse, WeatherResult
from shared.models import AdapterError, AdapterFailure
from shared.tracing import Tracing, mark_span_error

logger = structlog.get_logger(__name__)

# Plain decimal notation with an optional exponent; no inf/nan, no whitespace.
COORDINATE_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)

CURRENT_FIELD = "temperature_2m"


def parse_coordinate(value: str) -> float:
    """
    Parse a coordinate string as a finite decimal number.

    Raises:
        AdapterError: INVALID_INPUT when the string is not a decimal number
    """
    if not COORDINATE_PATTERN.fullmatch(value or ""):
        raise AdapterError(AdapterFailure.INVALID_INPUT, f"invalid coordinate: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise AdapterError(AdapterFailure.INVALID_INPUT, f"invalid coordinate: {value!r}")
    return number


class WeatherClient:
    """Fetches the current temperature from the forecast API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        tracing: Tracing,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._client = http_client
        self.base_url = base_url.rstrip("/")
        self._tracing = tracing
        self._tracer = tracing.get_tracer(__name__)
        self._timeout = httpx.Timeout(timeout_seconds)

    async def current_temperature(self, latitude: str, longitude: str) -> WeatherResult:
        """
        Read the current temperature at the given coordinates.

        Coordinates are validated before any call is made and forwarded to
        the API exactly as received.

        Args:
            latitude: Latitude as a decimal string
            longitude: Longitude as a decimal string

        Returns:
            Current reading in Celsius

        Raises:
            AdapterError: INVALID_INPUT for malformed coordinates,
                TRANSPORT_FAILURE for anything the API gets wrong
        """
        with self._tracer.start_as_current_span(
            "weather_lookup",
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            span.set_attribute("geo.latitude", latitude)
            span.set_attribute("geo.longitude", longitude)
            try:
                parse_coordinate(latitude)
                parse_coordinate(longitude)
                result = await self._fetch(latitude, longitude, span)
            except AdapterError as exc:
                mark_span_error(span, exc)
                logger.warning(
                    "weather_lookup_failed",
                    latitude=latitude,
                    longitude=longitude,
                    failure=exc.failure.value,
                    detail=exc.detail,
                )
                raise

        logger.debug("weather_lookup_succeeded", temperature_celsius=result.temperature_celsius)
        return result

    async def _fetch(self, latitude: str, longitude: str, span: Span) -> WeatherResult:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": CURRENT_FIELD,
        }
        span.set_attribute("upstream.url", self.base_url)

        try:
            response = await self._client.get(
                self.base_url,
                params=params,
                headers=self._tracing.inject(),
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            raise AdapterError(
                AdapterFailure.TRANSPORT_FAILURE, f"weather request failed: {exc!r}"
            ) from exc

        span.set_attribute("http.status_code", response.status_code)

        if response.status_code != httpx.codes.OK:
            raise AdapterError(
                AdapterFailure.TRANSPORT_FAILURE,
                f"weather api returned {response.status_code}",
            )

        try:
            payload = WeatherApiResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise AdapterError(
                AdapterFailure.TRANSPORT_FAILURE,
                f"malformed weather payload: {exc.error_count()} error(s)",
            ) from exc

        return WeatherResult(temperature_celsius=payload.current.temperature_2m)
