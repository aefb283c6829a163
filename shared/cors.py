"""
Permissive CORS policy for local development.

Every response allows any origin, method and header with credentials, and
every OPTIONS request is answered immediately with an empty 200. Starlette's
CORSMiddleware is not used because it rewrites the wildcard origin when
credentials are allowed and only short-circuits real preflight requests.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Allow-Credentials": "true",
}


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Allow-all CORS headers on every response."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
