"""
Static data store for the Markers service.
"""

from .models import LocationRecord, MarkerKind, MarkerSeed
from .marker_store import MarkerStore, build_markers

__all__ = [
    "LocationRecord",
    "MarkerKind",
    "MarkerSeed",
    "MarkerStore",
    "build_markers",
]
