"""Postal directory adapter: CEP -> city and coordinates."""

import httpx
import structlog
from opentelemetry.trace import Span
from pydantic import ValidationError

from resolver.src.models import DirectoryApiResponse, DirectoryLookupResult
from shared.models import AdapterError, AdapterFailure
from shared.tracing import Tracing, mark_span_error

logger = structlog.get_logger(__name__)


class DirectoryClient:
    """Looks up a CEP in the postal directory API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        tracing: Tracing,
        timeout_seconds: float = 10.0,
    ) -> None:
        """
        Initialize the directory adapter.

        Args:
            http_client: Shared httpx AsyncClient
            base_url: Directory base URL, the CEP is appended as a path segment
            tracing: Tracing handle used for the lookup span and header injection
            timeout_seconds: Timeout for the single outbound call
        """
        self._client = http_client
        self.base_url = base_url.rstrip("/")
        self._tracing = tracing
        self._tracer = tracing.get_tracer(__name__)
        self._timeout = httpx.Timeout(timeout_seconds)

    async def lookup(self, cep: str) -> DirectoryLookupResult:
        """
        Resolve a CEP to its city and coordinates.

        Args:
            cep: Eight-digit CEP, already validated by the caller

        Returns:
            Normalized lookup result

        Raises:
            AdapterError: NOT_FOUND for unknown codes, TRANSPORT_FAILURE for
                network errors, unexpected statuses and malformed bodies
        """
        url = f"{self.base_url}/{cep}"

        with self._tracer.start_as_current_span(
            "directory_lookup",
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            span.set_attribute("cep", cep)
            span.set_attribute("upstream.url", url)
            try:
                result = await self._fetch(url, span)
            except AdapterError as exc:
                mark_span_error(span, exc)
                logger.warning(
                    "directory_lookup_failed",
                    cep=cep,
                    failure=exc.failure.value,
                    detail=exc.detail,
                )
                raise

        logger.debug("directory_lookup_succeeded", cep=cep, city=result.city)
        return result

    async def _fetch(self, url: str, span: Span) -> DirectoryLookupResult:
        headers = self._tracing.inject()
        try:
            response = await self._client.get(url, headers=headers, timeout=self._timeout)
        except httpx.HTTPError as exc:
            raise AdapterError(
                AdapterFailure.TRANSPORT_FAILURE, f"directory request failed: {exc!r}"
            ) from exc

        span.set_attribute("http.status_code", response.status_code)

        if response.status_code == httpx.codes.NOT_FOUND:
            raise AdapterError(AdapterFailure.NOT_FOUND, "directory returned 404")
        if response.status_code != httpx.codes.OK:
            raise AdapterError(
                AdapterFailure.TRANSPORT_FAILURE,
                f"directory returned {response.status_code}",
            )

        payload = self._parse(response.content)

        # The directory answers unknown codes with 200 and no CEP echo.
        if not payload.cep:
            raise AdapterError(AdapterFailure.NOT_FOUND, "directory returned an empty CEP echo")

        return DirectoryLookupResult(
            city=payload.city,
            latitude=payload.lat,
            longitude=payload.lng,
            raw_cep=payload.cep,
            state=payload.state or "",
            district=payload.district or "",
        )

    @staticmethod
    def _parse(content: bytes) -> DirectoryApiResponse:
        try:
            return DirectoryApiResponse.model_validate_json(content)
        except ValidationError as exc:
            raise AdapterError(
                AdapterFailure.TRANSPORT_FAILURE,
                f"malformed directory payload: {exc.error_count()} error(s)",
            ) from exc
