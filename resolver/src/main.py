"""
FastAPI application entry point for the resolution service.

This module provides the application factory with:
- GET /{cep}: CEP -> current temperature in three scales
- Health and Prometheus metrics endpoints
- Request logging, correlation IDs and JSON error bodies
- OpenTelemetry tracing through an injected ``Tracing`` handle
- Shared outbound HTTP client lifecycle
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import httpx
import structlog
import uvicorn
from fastapi import FastAPI

from resolver.src.adapters import DirectoryClient, WeatherClient
from resolver.src.config import Settings, get_settings
from resolver.src.routers import temperature
from resolver.src.services import ResolutionService
from shared.clients import build_async_client
from shared.logging import configure_logging
from shared.metrics import HTTPMetrics
from shared.middleware import RequestLoggingMiddleware, register_exception_handlers
from shared.routers import build_ops_router
from shared.tracing import Tracing, configure_tracing

logger = structlog.get_logger(__name__)


def build_tracing(settings: Settings) -> Tracing:
    """Build the tracing handle from settings."""
    provider = configure_tracing(
        service_name=settings.app_name,
        otlp_endpoint=settings.tracing_otlp_endpoint,
        sampling_rate=settings.tracing_sample_rate,
        exporter_enabled=settings.tracing_enabled,
        service_version=settings.app_version,
    )
    return Tracing(provider)


def create_app(
    settings: Optional[Settings] = None,
    tracing: Optional[Tracing] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the resolution service application.

    Args:
        settings: Service settings, loaded from the environment if omitted
        tracing: Tracing handle, built from settings if omitted
        http_client: Outbound client shared by both adapters

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    tracing = tracing or build_tracing(settings)
    http_client = http_client or build_async_client(settings.upstream_timeout_seconds)

    directory = DirectoryClient(
        http_client=http_client,
        base_url=settings.directory_api_url,
        tracing=tracing,
        timeout_seconds=settings.upstream_timeout_seconds,
    )
    weather = WeatherClient(
        http_client=http_client,
        base_url=settings.weather_api_url,
        tracing=tracing,
        timeout_seconds=settings.upstream_timeout_seconds,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "application_started",
            app_name=settings.app_name,
            version=settings.app_version,
            environment=settings.environment,
            directory_api_url=settings.directory_api_url,
            weather_api_url=settings.weather_api_url,
        )
        try:
            yield
        finally:
            logger.info("application_shutting_down")
            await http_client.aclose()
            tracing.shutdown()
            logger.info("application_shutdown_complete")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Resolves a CEP to its city's current temperature.",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.tracing = tracing
    app.state.resolution_service = ResolutionService(
        directory=directory,
        weather=weather,
        tracing=tracing,
        deadline_seconds=settings.request_deadline_seconds,
    )

    metrics = HTTPMetrics()
    app.add_middleware(RequestLoggingMiddleware, metrics=metrics)
    register_exception_handlers(app)

    # Fixed paths first: /{cep} would otherwise shadow them.
    app.include_router(
        build_ops_router(
            settings.app_name,
            settings.app_version,
            metrics.registry,
            metrics_enabled=settings.metrics_enabled,
        )
    )
    app.include_router(temperature.router)

    return app


def main() -> None:
    """Run the resolution service with Uvicorn."""
    settings = get_settings()

    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.log_format == "json",
        service_name=settings.app_name,
        environment=settings.environment,
    )

    logger.info("starting_uvicorn_server", host=settings.host, port=settings.port)

    uvicorn.run(
        "resolver.src.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
