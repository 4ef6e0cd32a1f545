"""Routers shared by both services."""

from shared.routers.ops import build_ops_router

__all__ = ["build_ops_router"]
