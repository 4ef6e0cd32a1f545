"""API routers of the resolution service."""
