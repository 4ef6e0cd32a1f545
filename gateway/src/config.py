"""
Edge gateway configuration using Pydantic Settings.

Provides centralized configuration for:
- Service identity and bind address
- Resolution service location
- Outbound call timeout and the per-request deadline
- Logging, tracing and metrics

Settings can be overridden via environment variables with the prefix
"GATEWAY_" (e.g., GATEWAY_PORT). The resolution service URL is read from
RESOLUTION_SERVICE_URL, with SERVICE_B_URL accepted as a fallback name.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RESOLVER_URL = "http://localhost:8090"


class Settings(BaseSettings):
    """Edge gateway settings loaded from environment variables."""

    # =========================================================================
    # Service Settings
    # =========================================================================

    app_name: str = Field(default="edge-gateway", description="Service name")
    app_version: str = Field(default="1.0.0", description="Service version")
    environment: str = Field(
        default="production",
        description="Environment: development|staging|production"
    )
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8080, description="Bind port", gt=0, lt=65536)

    # =========================================================================
    # Resolution Service
    # =========================================================================

    resolver_url: str = Field(
        default=DEFAULT_RESOLVER_URL,
        validation_alias=AliasChoices("RESOLUTION_SERVICE_URL", "SERVICE_B_URL", "resolver_url"),
        description="Base URL of the resolution service"
    )
    upstream_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for the call to the resolution service (seconds)",
        gt=0
    )
    request_deadline_seconds: float = Field(
        default=60.0,
        description="End-to-end deadline for one inbound request (seconds)",
        gt=0
    )

    # =========================================================================
    # Observability
    # =========================================================================

    log_level: str = Field(default="INFO", description="Log level: DEBUG|INFO|WARNING|ERROR|CRITICAL")
    log_format: str = Field(default="json", description="Log format: json|text")

    metrics_enabled: bool = Field(default=True, description="Expose Prometheus metrics")

    tracing_enabled: bool = Field(default=True, description="Export traces over OTLP")
    tracing_otlp_endpoint: str = Field(
        default="otel-collector:4317",
        description="OTLP gRPC collector endpoint"
    )
    tracing_sample_rate: float = Field(
        default=1.0,
        description="Root span sampling rate (0.0-1.0)",
        ge=0.0,
        le=1.0
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("resolver_url")
    @classmethod
    def validate_resolver_url(cls, v: str) -> str:
        """Fall back to the default for an empty value, drop trailing slashes."""
        v = v.strip()
        if not v:
            return DEFAULT_RESOLVER_URL
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"resolver_url must be an http(s) URL, got: {v}")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got: {v}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = ["json", "text"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got: {v}")
        return v_lower

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = ["development", "staging", "production"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of {allowed}, got: {v}")
        return v_lower

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing with patched env vars)."""
    get_settings.cache_clear()
