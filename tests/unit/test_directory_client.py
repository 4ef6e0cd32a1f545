"""
Unit tests for the postal directory adapter.

Tests cover:
- Successful lookup and normalization
- 404 and "empty CEP echo" not-found signals
- Unexpected statuses, malformed bodies and network errors
- Trace context propagation on the outbound call
"""

from collections.abc import AsyncIterator

import httpx
import pytest
from opentelemetry.trace import StatusCode
from respx import MockRouter

from resolver.src.adapters import DirectoryClient
from shared.models import AdapterError, AdapterFailure
from tests.payloads import DIRECTORY_URL, directory_body

CEP = "29902555"
URL = f"{DIRECTORY_URL}/{CEP}"


@pytest.fixture
async def directory(tracing) -> AsyncIterator[DirectoryClient]:
    async with httpx.AsyncClient() as http_client:
        yield DirectoryClient(http_client, DIRECTORY_URL, tracing, timeout_seconds=10.0)


@pytest.mark.asyncio
async def test_lookup_success(directory: DirectoryClient, respx_mock: MockRouter) -> None:
    route = respx_mock.get(URL).mock(return_value=httpx.Response(200, json=directory_body()))

    result = await directory.lookup(CEP)

    assert route.call_count == 1
    assert result.city == "Vitória"
    assert result.latitude == "-20.31"
    assert result.longitude == "-40.33"
    assert result.raw_cep == CEP
    assert result.state == "ES"


@pytest.mark.asyncio
async def test_nulls_in_unread_fields_are_ignored(directory: DirectoryClient, respx_mock: MockRouter) -> None:
    body = directory_body()
    body.update({"address_name": None, "ddd": None, "city_ibge": None, "state": None, "district": None})
    respx_mock.get(URL).mock(return_value=httpx.Response(200, json=body))

    result = await directory.lookup(CEP)

    assert result.city == "Vitória"
    assert result.latitude == "-20.31"
    assert result.state == ""
    assert result.district == ""


@pytest.mark.asyncio
async def test_upstream_404_is_not_found(directory: DirectoryClient, respx_mock: MockRouter) -> None:
    respx_mock.get(URL).mock(
        return_value=httpx.Response(404, json={"code": "not_found", "message": "CEP 29902555 nao encontrado"})
    )

    with pytest.raises(AdapterError) as exc_info:
        await directory.lookup(CEP)

    assert exc_info.value.failure is AdapterFailure.NOT_FOUND


@pytest.mark.asyncio
async def test_empty_cep_echo_is_not_found(directory: DirectoryClient, respx_mock: MockRouter) -> None:
    """A success status with no CEP echo still means the code is unknown."""
    respx_mock.get(f"{DIRECTORY_URL}/99999999").mock(
        return_value=httpx.Response(200, json={"cep": "", "city": "", "lat": "", "lng": ""})
    )

    with pytest.raises(AdapterError) as exc_info:
        await directory.lookup("99999999")

    assert exc_info.value.failure is AdapterFailure.NOT_FOUND


@pytest.mark.asyncio
async def test_missing_cep_echo_is_not_found(directory: DirectoryClient, respx_mock: MockRouter) -> None:
    respx_mock.get(URL).mock(
        return_value=httpx.Response(200, json={"status": 400, "code": "invalid", "message": "CEP invalido"})
    )

    with pytest.raises(AdapterError) as exc_info:
        await directory.lookup(CEP)

    assert exc_info.value.failure is AdapterFailure.NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401, 429, 500, 502, 503])
async def test_other_statuses_are_transport_failures(
    directory: DirectoryClient, respx_mock: MockRouter, status_code: int
) -> None:
    respx_mock.get(URL).mock(return_value=httpx.Response(status_code, text="upstream trouble"))

    with pytest.raises(AdapterError) as exc_info:
        await directory.lookup(CEP)

    assert exc_info.value.failure is AdapterFailure.TRANSPORT_FAILURE
    assert str(status_code) in exc_info.value.detail


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content",
    [b"<html>gateway error</html>", b'{"cep": "29902555", ', b"[]", b'{"cep": 29902555}'],
)
async def test_malformed_body_is_transport_failure(
    directory: DirectoryClient, respx_mock: MockRouter, content: bytes
) -> None:
    respx_mock.get(URL).mock(return_value=httpx.Response(200, content=content))

    with pytest.raises(AdapterError) as exc_info:
        await directory.lookup(CEP)

    assert exc_info.value.failure is AdapterFailure.TRANSPORT_FAILURE


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [httpx.ConnectError("connection refused"), httpx.ReadTimeout("timed out")],
)
async def test_network_errors_are_transport_failures(
    directory: DirectoryClient, respx_mock: MockRouter, error: Exception
) -> None:
    respx_mock.get(URL).mock(side_effect=error)

    with pytest.raises(AdapterError) as exc_info:
        await directory.lookup(CEP)

    assert exc_info.value.failure is AdapterFailure.TRANSPORT_FAILURE


@pytest.mark.asyncio
async def test_lookup_emits_span_and_propagates_context(
    directory: DirectoryClient, respx_mock: MockRouter, span_exporter
) -> None:
    route = respx_mock.get(URL).mock(return_value=httpx.Response(200, json=directory_body()))

    await directory.lookup(CEP)

    spans = span_exporter.get_finished_spans()
    assert [span.name for span in spans] == ["directory_lookup"]
    span = spans[0]
    assert span.attributes["cep"] == CEP
    assert span.attributes["http.status_code"] == 200

    traceparent = route.calls.last.request.headers["traceparent"]
    assert format(span.context.trace_id, "032x") in traceparent
    assert format(span.context.span_id, "016x") in traceparent


@pytest.mark.asyncio
async def test_failed_lookup_marks_span_as_error(
    directory: DirectoryClient, respx_mock: MockRouter, span_exporter
) -> None:
    respx_mock.get(URL).mock(return_value=httpx.Response(404))

    with pytest.raises(AdapterError):
        await directory.lookup(CEP)

    (span,) = span_exporter.get_finished_spans()
    assert span.status.status_code is StatusCode.ERROR
    assert span.events[0].name == "exception"
