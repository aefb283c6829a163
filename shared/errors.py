"""
Shared error handling for the Markers service.
"""

from typing import Dict, Any, Optional

from pydantic import BaseModel
from starlette.responses import JSONResponse, PlainTextResponse, Response


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class AccessLayerException(Exception):
    """Base exception for service errors raised at the HTTP boundary."""

    status_code: int = 400

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, request_id: Optional[str] = None) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id,
            code=self.code,
            message=self.message,
            details=self.details
        )

    def to_http_response(self, request_id: Optional[str] = None) -> Response:
        """Render as the HTTP response returned to the client."""
        return JSONResponse(
            status_code=self.status_code,
            content=self.to_response(request_id).model_dump()
        )


class AuthenticationError(AccessLayerException):
    """Credential missing from the request."""

    status_code = 401

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHENTICATION_ERROR", message, details)

    def to_http_response(self, request_id: Optional[str] = None) -> Response:
        # Clients only get the status code.
        return Response(status_code=self.status_code)


class AuthorizationError(AccessLayerException):
    """Credential present but not accepted."""

    status_code = 403

    def __init__(self, message: str = "Authorization failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHORIZATION_ERROR", message, details)

    def to_http_response(self, request_id: Optional[str] = None) -> Response:
        return Response(status_code=self.status_code)


class SerializationError(AccessLayerException):
    """A route failed to render its payload."""

    status_code = 400

    def __init__(self, route_name: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.route_name = route_name
        super().__init__("SERIALIZATION_ERROR", message, details)

    def to_http_response(self, request_id: Optional[str] = None) -> Response:
        return PlainTextResponse(
            f"{self.route_name} Error: {self.message}",
            status_code=self.status_code
        )


class ConfigurationError(AccessLayerException):
    """Invalid or missing startup configuration."""

    status_code = 500

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class InternalServiceError(AccessLayerException):
    """Unexpected failure while handling a request."""

    status_code = 500

    def __init__(self, message: str = "Internal server error", details: Optional[Dict[str, Any]] = None):
        super().__init__("INTERNAL_ERROR", message, details)
