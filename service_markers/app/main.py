"""
Markers service.

Serves the simulated IoT base gateway and wallet locations used by the map
client. Both data routes require the shared bearer token; /health and
/metrics are public.
"""

from typing import Optional

from fastapi import Depends, Response

from shared.base_service import BaseService
from shared.config import ServiceConfig
from shared.errors import SerializationError

from .domain.auth_middleware import AuthMiddleware
from .store import MarkerKind, MarkerStore

ROUTE_NAMES = {
    MarkerKind.BASE: "Base Markers",
    MarkerKind.WALLET: "Wallet Markers",
}


class MarkersService(BaseService):
    """Markers service implementation."""

    def __init__(self, config: Optional[ServiceConfig] = None, store: Optional[MarkerStore] = None):
        super().__init__("markers", config)
        self.store = store if store is not None else MarkerStore.create(seed=self.config.marker_seed)
        self.auth_middleware = AuthMiddleware(self.config.api_key, metrics=self.metrics)

        self._setup_marker_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.markers_service = self

    def _render(self, kind: MarkerKind) -> Response:
        """Serialize a marker collection, mapping failures to a 400."""
        route_name = ROUTE_NAMES[kind]
        try:
            payload = self.store.serialize(kind)
        except (TypeError, ValueError) as e:
            self.logger.error(f"{route_name} Error: {e}", kind=kind.value)
            raise SerializationError(route_name, str(e)) from e

        self.metrics.increment_counter("markers_served_total", kind=kind.value)
        return Response(content=payload, media_type="application/json")

    def _setup_marker_routes(self):
        """Set up marker routes."""

        @self.app.get("/api/base_markers", dependencies=[Depends(self.auth_middleware)])
        async def get_base_markers():
            """Return every IoT base gateway marker."""
            return self._render(MarkerKind.BASE)

        @self.app.get("/api/wallet_markers", dependencies=[Depends(self.auth_middleware)])
        async def get_wallet_markers():
            """Return every wallet marker."""
            return self._render(MarkerKind.WALLET)


def create_app():
    """Create FastAPI application."""
    service = MarkersService()
    return service.app


def main():
    service = MarkersService()
    service.run()


if __name__ == "__main__":
    main()
