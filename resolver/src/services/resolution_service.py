"""Resolves a CEP to its current temperature.

The directory lookup and the weather lookup run strictly in sequence: the
weather call needs the coordinates the directory returns.
"""

import asyncio
from typing import Mapping, Optional

import structlog
from opentelemetry.context import Context

from resolver.src.adapters import DirectoryClient, WeatherClient
from resolver.src.transformers import to_temperature_result
from shared.models import (
    AdapterError,
    AdapterFailure,
    ErrorKind,
    OutwardError,
    TemperatureResult,
    is_valid_cep,
)
from shared.tracing import Tracing, mark_span_error

logger = structlog.get_logger(__name__)

# Every adapter failure reads as "can not find zipcode" to the caller,
# weather failures included.
ADAPTER_FAILURE_TO_ERROR: Mapping[AdapterFailure, ErrorKind] = {
    AdapterFailure.NOT_FOUND: ErrorKind.ZIPCODE_NOT_FOUND,
    AdapterFailure.TRANSPORT_FAILURE: ErrorKind.ZIPCODE_NOT_FOUND,
    AdapterFailure.INVALID_INPUT: ErrorKind.ZIPCODE_NOT_FOUND,
}


def to_outward_error(exc: AdapterError) -> OutwardError:
    """Collapse an adapter failure into the caller-facing error.

    The adapter's detail text is dropped here.
    """
    return OutwardError(ADAPTER_FAILURE_TO_ERROR[exc.failure])


class ResolutionService:
    """Second stage of the pipeline: CEP -> TemperatureResult."""

    def __init__(
        self,
        directory: DirectoryClient,
        weather: WeatherClient,
        tracing: Tracing,
        deadline_seconds: Optional[float] = 60.0,
    ) -> None:
        """
        Initialize the resolution service.

        Args:
            directory: Postal directory adapter
            weather: Weather adapter
            tracing: Tracing handle for the handler span
            deadline_seconds: End-to-end budget for one resolution, None to disable
        """
        self.directory = directory
        self.weather = weather
        self._tracer = tracing.get_tracer(__name__)
        self.deadline_seconds = deadline_seconds

    async def resolve(self, cep: str, parent_context: Optional[Context] = None) -> TemperatureResult:
        """
        Resolve a CEP to the current temperature of its city.

        Args:
            cep: CEP as received in the request path
            parent_context: Trace context extracted from the inbound request

        Returns:
            Temperature in Celsius, Fahrenheit and Kelvin

        Raises:
            OutwardError: INVALID_ZIPCODE for a malformed CEP,
                ZIPCODE_NOT_FOUND when either lookup fails,
                INTERNAL when the request deadline expires
        """
        with self._tracer.start_as_current_span(
            "resolve_temperature",
            context=parent_context,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            span.set_attribute("cep", cep)
            try:
                if not is_valid_cep(cep):
                    raise OutwardError.invalid_zipcode()

                result = await asyncio.wait_for(self._lookup(cep), timeout=self.deadline_seconds)
            except asyncio.TimeoutError as exc:
                mark_span_error(span, exc, "request deadline exceeded")
                logger.error("resolution_deadline_exceeded", cep=cep, deadline=self.deadline_seconds)
                raise OutwardError.internal("request deadline exceeded") from exc
            except OutwardError as exc:
                mark_span_error(span, exc)
                raise

            span.set_attribute("city", result.city)

        logger.info("cep_resolved", cep=cep, city=result.city, temp_c=result.temp_c)
        return result

    async def _lookup(self, cep: str) -> TemperatureResult:
        try:
            location = await self.directory.lookup(cep)
        except AdapterError as exc:
            logger.info("cep_not_found", cep=cep, stage="directory", failure=exc.failure.value)
            raise to_outward_error(exc) from exc

        try:
            reading = await self.weather.current_temperature(location.latitude, location.longitude)
        except AdapterError as exc:
            logger.info("cep_not_found", cep=cep, stage="weather", failure=exc.failure.value)
            raise to_outward_error(exc) from exc

        return to_temperature_result(location.city, reading.temperature_celsius)
