"""
In-memory store for the simulated map markers.

Both collections are built once, when the store is created, and are exposed
as tuples of frozen records afterwards. Coordinates are jittered at build
time only, so every read returns the same values for the life of the process.
"""

import json
import random
from typing import Dict, Iterable, Optional, Tuple

from shared.logging import get_logger

from .models import LocationRecord, MarkerKind, MarkerSeed
from .seeds import BASE_MARKER_SEEDS, WALLET_MARKER_SEEDS


def _jitter(rng: random.Random, value: float, magnitude: float) -> float:
    if not magnitude:
        return value
    return value + rng.uniform(-magnitude, magnitude)


def build_markers(seeds: Iterable[MarkerSeed], rng: random.Random) -> Tuple[LocationRecord, ...]:
    """Build location records from seeds, applying each seed's jitter once."""
    return tuple(
        LocationRecord(
            network=seed.network,
            identity=seed.identity,
            latitude=_jitter(rng, seed.latitude, seed.jitter),
            longitude=_jitter(rng, seed.longitude, seed.jitter),
            label=seed.label,
        )
        for seed in seeds
    )


class MarkerStore:
    """Read-only holder for the base and wallet marker collections."""

    def __init__(self, base_markers: Tuple[LocationRecord, ...], wallet_markers: Tuple[LocationRecord, ...]):
        self._collections: Dict[MarkerKind, Tuple[LocationRecord, ...]] = {
            MarkerKind.BASE: tuple(base_markers),
            MarkerKind.WALLET: tuple(wallet_markers),
        }

    @classmethod
    def create(cls, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> "MarkerStore":
        """Build both collections from the built-in seed tables.

        Pass ``seed`` (or a seeded ``rng``) for reproducible coordinates.
        """
        if rng is None:
            rng = random.Random(seed)

        store = cls(
            base_markers=build_markers(BASE_MARKER_SEEDS, rng),
            wallet_markers=build_markers(WALLET_MARKER_SEEDS, rng),
        )
        get_logger("markers.store").info("Marker store initialized", **store.counts())
        return store

    @property
    def base_markers(self) -> Tuple[LocationRecord, ...]:
        return self._collections[MarkerKind.BASE]

    @property
    def wallet_markers(self) -> Tuple[LocationRecord, ...]:
        return self._collections[MarkerKind.WALLET]

    def get(self, kind: MarkerKind) -> Tuple[LocationRecord, ...]:
        """Return the full collection for a marker kind."""
        return self._collections[MarkerKind(kind)]

    def serialize(self, kind: MarkerKind) -> bytes:
        """Render a collection as a JSON array."""
        payload = [record.model_dump() for record in self.get(kind)]
        return json.dumps(payload, separators=(",", ":"), allow_nan=False).encode("utf-8")

    def counts(self) -> Dict[str, int]:
        return {kind.value: len(records) for kind, records in self._collections.items()}
