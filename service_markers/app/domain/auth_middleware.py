"""
Authentication middleware for the Markers service.
"""

import hmac
from typing import Optional

from fastapi import Request

from shared.errors import AuthenticationError, AuthorizationError
from shared.logging import get_logger
from shared.metrics import MetricsCollector


def extract_bearer_token(auth_header: Optional[str]) -> Optional[str]:
    """Return the credential following the first space of the header.

    The scheme word itself is not checked and the token ends at the next
    space. A header without a space carries no token; "Bearer " carries an
    empty one.
    """
    if not auth_header:
        return None
    parts = auth_header.split(" ")
    if len(parts) < 2:
        return None
    return parts[1]


class AuthMiddleware:
    """Shared-secret bearer token check for protected routes."""

    def __init__(self, api_key: str, metrics: Optional[MetricsCollector] = None):
        if not api_key:
            raise ValueError("api_key must not be empty")
        self._api_key = api_key
        self.metrics = metrics
        self.logger = get_logger("markers.auth_middleware")

    def _reject(self, reason: str, path: str) -> None:
        self.logger.warning("Request rejected", reason=reason, path=path)
        if self.metrics is not None:
            self.metrics.increment_counter("auth_failures_total", reason=reason)

    def verify_token(self, token: Optional[str], path: str = "") -> None:
        """Raise unless ``token`` matches the configured secret."""
        if token is None:
            self._reject("missing_token", path)
            raise AuthenticationError("Bearer token required")

        if not hmac.compare_digest(token.encode("utf-8"), self._api_key.encode("utf-8")):
            self._reject("invalid_token", path)
            raise AuthorizationError("Invalid bearer token")

    async def authenticate_request(self, request: Request) -> None:
        """Authenticate incoming request with the Authorization header."""
        token = extract_bearer_token(request.headers.get("Authorization"))
        self.verify_token(token, request.url.path)

    async def __call__(self, request: Request) -> None:
        """FastAPI dependency entry point."""
        await self.authenticate_request(request)
