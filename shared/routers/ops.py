"""Health and metrics endpoints mounted on both services."""

from fastapi import APIRouter, Response
from prometheus_client import CollectorRegistry

from shared.metrics import CONTENT_TYPE_LATEST, get_metrics_handler
from shared.models import HealthStatus, ServiceInfo


def build_ops_router(
    service_name: str,
    version: str,
    registry: CollectorRegistry,
    metrics_enabled: bool = True,
) -> APIRouter:
    """Build the /health and /metrics routes for a service.

    Must be included before any catch-all path route such as ``/{cep}``.
    """
    router = APIRouter(tags=["Operations"])
    render_metrics = get_metrics_handler(registry)

    @router.get("/health", response_model=ServiceInfo)
    async def health_check() -> ServiceInfo:
        """Liveness probe; does not check upstream dependencies."""
        return ServiceInfo(status=HealthStatus.HEALTHY, service=service_name, version=version)

    if metrics_enabled:

        @router.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            return Response(content=render_metrics(), media_type=CONTENT_TYPE_LATEST)

    return router
