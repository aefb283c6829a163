"""
Marker data models for the Markers service.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MarkerKind(str, Enum):
    """Marker collection types."""
    BASE = "base"
    WALLET = "wallet"


@dataclass(frozen=True)
class MarkerSeed:
    """Static definition a location record is built from."""
    network: str
    identity: str
    latitude: float
    longitude: float
    label: str
    jitter: float = 0.0


class LocationRecord(BaseModel):
    """A gateway or wallet position on the map."""

    model_config = ConfigDict(frozen=True)

    network: str = Field(..., description="Ledger the identity belongs to")
    identity: str = Field(..., description="Public address on the network")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    label: str = Field(..., description="Human readable description")
