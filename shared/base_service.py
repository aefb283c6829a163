"""
Base service class for the Markers service.
"""

from fastapi import FastAPI, Request, Response
from typing import Optional
import time

from shared.config import ServiceConfig, get_config
from shared.cors import PermissiveCORSMiddleware
from shared.logging import configure_logging, get_logger, get_request_id, set_request_id, clear_context
from shared.metrics import get_metrics_collector
from shared.errors import AccessLayerException, InternalServiceError

HEALTH_STATUS = "healthy xxx"

# Health checks log their own line; no access log for them.
QUIET_PATHS = frozenset({"/health"})
UNMATCHED_ENDPOINT = "unmatched"


class BaseService:
    """Base service class with common functionality."""

    def __init__(self, service_name: str, config: Optional[ServiceConfig] = None):
        self.service_name = service_name
        self.config = config if config is not None else get_config(service_name)
        self.port = self.config.port

        # Configure logging
        configure_logging(service_name, self.config.log_level)
        self.logger = get_logger(f"{service_name}.service")
        self.metrics = get_metrics_collector(service_name)

        # Create FastAPI app
        self.app = self._create_app()

        # Set up middleware
        self._setup_middleware()

        # Set up routes
        self._setup_routes()

    def _create_app(self) -> FastAPI:
        """Create FastAPI application."""
        return FastAPI(
            title=f"{self.service_name.title()} Service",
            description=f"{self.service_name.title()} Service - simulated map markers",
            version="1.0.0",
            docs_url="/docs" if self.config.access_env == "local" else None,
            redoc_url="/redoc" if self.config.access_env == "local" else None,
        )

    def _setup_middleware(self):
        """Set up middleware."""

        self.app.add_middleware(PermissiveCORSMiddleware)

        # Request timing middleware, registered last so it wraps CORS
        @self.app.middleware("http")
        async def add_request_timing(request: Request, call_next):
            request_id = set_request_id(request.headers.get("X-Request-ID"))
            start_time = time.time()

            try:
                try:
                    response = await call_next(request)
                except Exception as exc:
                    self.logger.error("Unhandled exception", error=str(exc), exc_info=True)
                    error = InternalServiceError()
                    self.metrics.record_error(error.code)
                    response = error.to_http_response(request_id)

                duration = time.time() - start_time

                # Route templates keep the label set bounded; unknown paths share one series.
                endpoint = getattr(request.scope.get("route"), "path", UNMATCHED_ENDPOINT)
                self.metrics.record_http_request(
                    method=request.method,
                    endpoint=endpoint,
                    status_code=response.status_code,
                    duration=duration
                )

                if request.url.path not in QUIET_PATHS:
                    self.logger.info(
                        "HTTP request",
                        method=request.method,
                        path=request.url.path,
                        status_code=response.status_code,
                        duration_ms=round(duration * 1000, 2)
                    )

                response.headers["X-Request-ID"] = request_id
                return response
            finally:
                clear_context()

    def _setup_routes(self):
        """Set up common routes."""

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint."""
            self.logger.info("=== HEALTH CHECK ===")
            self.metrics.record_health_check("ok")
            return {"status": HEALTH_STATUS}

        @self.app.get("/metrics")
        async def metrics_endpoint():
            """Prometheus metrics endpoint."""
            from prometheus_client import CONTENT_TYPE_LATEST
            return Response(
                content=self.metrics.export(),
                media_type=CONTENT_TYPE_LATEST
            )

        # Error handlers
        @self.app.exception_handler(AccessLayerException)
        async def access_layer_exception_handler(request: Request, exc: AccessLayerException):
            """Handle AccessLayerException."""
            self.metrics.record_error(exc.code)
            return exc.to_http_response(get_request_id())

    def run(self):
        """Run the service."""
        import uvicorn
        self.logger.info(f"Server running at http://localhost:{self.config.port}")
        uvicorn.run(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower()
        )
