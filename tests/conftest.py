"""
Shared fixtures: in-memory tracing and service settings.
"""

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from gateway.src.config import Settings as GatewaySettings
from resolver.src.config import Settings as ResolverSettings
from shared.tracing import Tracing
from tests.payloads import DIRECTORY_URL, RESOLVER_URL, WEATHER_URL


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracing(span_exporter: InMemorySpanExporter) -> Tracing:
    """Tracing handle that records finished spans in memory."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return Tracing(provider)


@pytest.fixture
def resolver_settings() -> ResolverSettings:
    return ResolverSettings(
        environment="development",
        directory_api_url=DIRECTORY_URL,
        weather_api_url=WEATHER_URL,
        tracing_enabled=False,
    )


@pytest.fixture
def gateway_settings() -> GatewaySettings:
    return GatewaySettings(
        environment="development",
        resolver_url=RESOLVER_URL,
        tracing_enabled=False,
    )
