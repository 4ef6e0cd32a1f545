"""API routers of the edge gateway."""
