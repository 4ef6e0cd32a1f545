"""Builder for the outbound httpx client.

One ``httpx.AsyncClient`` is shared by all requests of an app so outbound
calls reuse pooled connections. Per-call timeouts are passed at call time.
"""

from typing import Optional

import httpx

DEFAULT_HEADERS = {
    "User-Agent": "cep-weather/1.0",
    "Accept": "application/json",
}


def build_async_client(
    timeout_seconds: float = 10.0,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the service defaults.

    Args:
        timeout_seconds: Default timeout for every outbound call
        transport: Custom transport (e.g. ``httpx.ASGITransport`` in tests)

    Returns:
        Configured AsyncClient
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        headers=DEFAULT_HEADERS,
        transport=transport,
    )
