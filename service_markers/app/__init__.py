"""
Markers Service package.

Serves two fixed collections of simulated map markers, IoT base gateways
and wallets, to the map client.

Structure:
- app.main: FastAPI app, routes, and service wiring.
- app.store: Marker models, seed tables, and the read-only marker store.
- app.domain: Cross-cutting request helpers (bearer token auth).

Design notes:
- Marker coordinates are jittered once when the store is built and never
  change afterwards; handlers only serialize what the store holds.
- Use the shared/ utilities for configuration, logging, metrics, and errors.
"""
