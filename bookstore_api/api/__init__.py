"""HTTP API: FastAPI application, routers and response translation."""
