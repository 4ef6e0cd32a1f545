"""First stage of the pipeline: validate the CEP and forward it."""

import asyncio
from typing import Optional

import structlog
from opentelemetry.context import Context
from pydantic import ValidationError

from gateway.src.services.resolution_client import ResolutionClient
from shared.models import CepRequest, OutwardError, TemperatureResult, is_valid_cep
from shared.tracing import Tracing, mark_span_error

logger = structlog.get_logger(__name__)


def parse_cep_request(body: bytes) -> str:
    """
    Decode and validate an inbound request body.

    Args:
        body: Raw JSON body, expected to be ``{"cep": "<8 digits>"}``

    Returns:
        The CEP, exactly as sent

    Raises:
        OutwardError: INVALID_ZIPCODE if the body does not decode or the
            CEP is not exactly eight digits
    """
    try:
        request = CepRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.info("cep_request_undecodable", errors=exc.error_count())
        raise OutwardError.invalid_zipcode() from exc

    if not is_valid_cep(request.cep):
        logger.info("cep_invalid", cep=request.cep)
        raise OutwardError.invalid_zipcode()

    return request.cep


class CepGateway:
    """Validates inbound CEP requests and relays them to the resolution service."""

    def __init__(
        self,
        resolution_client: ResolutionClient,
        tracing: Tracing,
        deadline_seconds: Optional[float] = 60.0,
    ) -> None:
        self.resolution_client = resolution_client
        self._tracer = tracing.get_tracer(__name__)
        self.deadline_seconds = deadline_seconds

    async def process(self, body: bytes, parent_context: Optional[Context] = None) -> TemperatureResult:
        """
        Handle one inbound request end to end.

        One span covers validation and the downstream call.

        Raises:
            OutwardError: the single error reported to the client
        """
        with self._tracer.start_as_current_span(
            "validate_and_process_cep",
            context=parent_context,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            try:
                cep = parse_cep_request(body)
                span.set_attribute("cep", cep)
                result = await asyncio.wait_for(
                    self.resolution_client.fetch_temperature(cep),
                    timeout=self.deadline_seconds,
                )
            except asyncio.TimeoutError as exc:
                mark_span_error(span, exc, "request deadline exceeded")
                logger.error("gateway_deadline_exceeded", deadline=self.deadline_seconds)
                raise OutwardError.internal("request deadline exceeded") from exc
            except OutwardError as exc:
                mark_span_error(span, exc)
                raise

        return result
