"""HTTP API package - FastAPI application, routes and dependencies."""
