"""Business logic services.

This package contains the orchestration of the directory and weather
adapters behind the resolver's HTTP endpoint.
"""

from resolver.src.services.resolution_service import (
    ADAPTER_FAILURE_TO_ERROR,
    ResolutionService,
    to_outward_error,
)

__all__ = ["ADAPTER_FAILURE_TO_ERROR", "ResolutionService", "to_outward_error"]
