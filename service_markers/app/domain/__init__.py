"""
Domain utilities for the Markers service.

Includes cross-cutting request processing helpers that do not belong to
the data store or the transport layer.
"""

from .auth_middleware import AuthMiddleware, extract_bearer_token

__all__ = [
    "AuthMiddleware",
    "extract_bearer_token",
]
