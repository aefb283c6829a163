"""
Shared utilities for the Markers service.

This package aggregates the common building blocks the service is built on:

- config: Service configuration via pydantic-settings
- logging: Structured logging with request correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses
- cors: Permissive development CORS policy
- base_service: FastAPI service base with health and metrics routes

Do not import from service packages into shared/.
"""
