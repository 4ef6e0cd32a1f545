"""Outbound HTTP client helpers."""

from .http_client import build_async_client

__all__ = ["build_async_client"]
