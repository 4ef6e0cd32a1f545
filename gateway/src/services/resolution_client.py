"""HTTP client for the resolution service's GET /{cep} endpoint."""

import httpx
import structlog
from pydantic import ValidationError

from shared.models import ErrorKind, OutwardError, TemperatureResult
from shared.tracing import Tracing, mark_span_error

logger = structlog.get_logger(__name__)


def extract_error_message(response: httpx.Response) -> str:
    """Best-effort error text from a failed resolution service response.

    Uses the ``error`` field of a JSON body when present and non-empty,
    otherwise the raw body text.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        message = body.get("error")
        if isinstance(message, str) and message:
            return message
    return response.text


class ResolutionClient:
    """Forwards a validated CEP to the resolution service."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        tracing: Tracing,
        timeout_seconds: float = 10.0,
    ) -> None:
        """
        Initialize the client.

        Args:
            http_client: Shared httpx AsyncClient
            base_url: Resolution service base URL
            tracing: Tracing handle used for the call span and header injection
            timeout_seconds: Timeout for the outbound call
        """
        self._client = http_client
        self.base_url = base_url.rstrip("/")
        self._tracing = tracing
        self._tracer = tracing.get_tracer(__name__)
        self._timeout = httpx.Timeout(timeout_seconds)

    async def fetch_temperature(self, cep: str) -> TemperatureResult:
        """
        Ask the resolution service for the temperature of a CEP.

        Args:
            cep: Validated eight-digit CEP

        Returns:
            The resolution service's result, parsed as ``TemperatureResult``;
            unknown keys are dropped and temperatures are floats

        Raises:
            OutwardError: INTERNAL for transport or parse failures; for a
                non-200 answer, the same status with the relayed message
        """
        url = f"{self.base_url}/{cep}"

        with self._tracer.start_as_current_span(
            "call_resolution_service",
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            span.set_attribute("cep", cep)
            span.set_attribute("upstream.url", url)

            try:
                response = await self._client.get(
                    url,
                    headers=self._tracing.inject(),
                    timeout=self._timeout,
                )
            except httpx.HTTPError as exc:
                mark_span_error(span, exc)
                logger.error("resolver_call_failed", cep=cep, url=url, error=repr(exc))
                raise OutwardError.internal(f"failed to call resolution service: {exc}") from exc

            span.set_attribute("http.status_code", response.status_code)

            if response.status_code != httpx.codes.OK:
                message = extract_error_message(response)
                error = OutwardError(
                    ErrorKind.from_status(response.status_code),
                    message,
                    status_code=response.status_code,
                )
                mark_span_error(span, error)
                logger.info(
                    "resolver_returned_error",
                    cep=cep,
                    status_code=response.status_code,
                    error=message,
                )
                raise error

            try:
                return TemperatureResult.model_validate_json(response.content)
            except ValidationError as exc:
                mark_span_error(span, exc, "unparsable resolution service response")
                logger.error("resolver_response_unparsable", cep=cep, errors=exc.error_count())
                raise OutwardError.internal("failed to parse response from resolution service") from exc
