"""OpenTelemetry configuration for distributed tracing.

Services never read the global tracer provider for their request spans.
Each app is built with a ``Tracing`` handle that owns a provider and a
W3C trace-context propagator, so tests can hand in an in-memory exporter.
"""

from typing import Mapping, MutableMapping, Optional

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from opentelemetry.trace import Status, StatusCode
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

SERVICE_NAMESPACE = "cep-weather"


def configure_tracing(
    service_name: str,
    otlp_endpoint: str = "otel-collector:4317",
    sampling_rate: float = 1.0,
    exporter_enabled: bool = True,
    service_version: str = "1.0.0",
) -> TracerProvider:
    """Build an OpenTelemetry tracer provider for the service.

    The provider is returned, not installed globally.

    Args:
        service_name: Name of the service (e.g., "edge-gateway")
        otlp_endpoint: OTLP gRPC collector endpoint
        sampling_rate: Sampling rate for root spans (0.0 to 1.0)
        exporter_enabled: Attach the OTLP exporter; disable for local runs
        service_version: Reported service version

    Returns:
        Configured TracerProvider
    """
    resource = Resource(
        attributes={
            "service.name": service_name,
            "service.namespace": SERVICE_NAMESPACE,
            "service.version": service_version,
        }
    )

    provider = TracerProvider(
        resource=resource,
        sampler=ParentBased(TraceIdRatioBased(sampling_rate)),
    )

    if exporter_enabled:
        exporter = OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(exporter))

    return provider


class Tracing:
    """Tracer provider and propagator handed to a service at construction."""

    def __init__(
        self,
        provider: trace.TracerProvider,
        propagator: Optional[TraceContextTextMapPropagator] = None,
    ) -> None:
        self.provider = provider
        self.propagator = propagator or TraceContextTextMapPropagator()

    def get_tracer(self, name: str) -> trace.Tracer:
        """Get a tracer from this handle's provider.

        Args:
            name: Tracer name (typically __name__)

        Returns:
            Tracer instance
        """
        return self.provider.get_tracer(name)

    def extract(self, headers: Mapping[str, str]) -> Context:
        """Continue a trace from inbound request headers.

        Returns an empty context when no trace headers are present, in
        which case spans started from it become new roots.
        """
        return self.propagator.extract(carrier=headers)

    def inject(
        self,
        headers: Optional[MutableMapping[str, str]] = None,
        context: Optional[Context] = None,
    ) -> MutableMapping[str, str]:
        """Write the current (or given) trace context into outbound headers."""
        carrier: MutableMapping[str, str] = {} if headers is None else headers
        self.propagator.inject(carrier, context=context)
        return carrier

    def shutdown(self) -> None:
        shutdown = getattr(self.provider, "shutdown", None)
        if shutdown is not None:
            shutdown()


def mark_span_error(span: trace.Span, exc: BaseException, description: Optional[str] = None) -> None:
    """Record an exception on a span and flag it as failed."""
    span.record_exception(exc)
    span.set_status(Status(StatusCode.ERROR, description or str(exc)))
