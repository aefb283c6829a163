"""
Unit tests for the marker store.
"""

import json
import random

import pytest
from pydantic import ValidationError

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from service_markers.app.store import LocationRecord, MarkerKind, MarkerSeed, MarkerStore, build_markers
from service_markers.app.store.seeds import BASE_MARKER_SEEDS, WALLET_MARKER_SEEDS


class TestBuildMarkers:
    """Test cases for build_markers."""

    def test_jitter_stays_within_magnitude(self):
        """Every coordinate lies within its seed's jitter of the base value."""
        records = build_markers(BASE_MARKER_SEEDS, random.Random(7))

        for seed, record in zip(BASE_MARKER_SEEDS, records):
            assert abs(record.latitude - seed.latitude) <= seed.jitter
            assert abs(record.longitude - seed.longitude) <= seed.jitter

    def test_zero_jitter_keeps_exact_position(self):
        """Seeds without jitter keep their exact coordinates."""
        seed = MarkerSeed("Stellar", "GEXACT", -22.967852, -43.178983, "Exact", 0.0)

        (record,) = build_markers([seed], random.Random())

        assert record.latitude == -22.967852
        assert record.longitude == -43.178983

    def test_copies_identity_fields(self):
        """Network, identity and label come straight from the seed."""
        records = build_markers(WALLET_MARKER_SEEDS, random.Random(1))

        assert [(r.network, r.identity, r.label) for r in records] == [
            (s.network, s.identity, s.label) for s in WALLET_MARKER_SEEDS
        ]

    def test_returns_tuple(self):
        """Built collections are immutable sequences."""
        assert isinstance(build_markers(WALLET_MARKER_SEEDS, random.Random()), tuple)


class TestMarkerStore:
    """Test cases for MarkerStore."""

    @pytest.fixture
    def store(self):
        """Create a store with reproducible coordinates."""
        return MarkerStore.create(seed=1234)

    def test_collection_sizes(self, store):
        """Both collections match the seed tables."""
        assert len(store.base_markers) == 22
        assert len(store.wallet_markers) == 10
        assert store.counts() == {"base": 22, "wallet": 10}

    def test_base_markers_include_rio_cluster(self, store):
        """Eight Rio de Janeiro bases are present."""
        rio = [r for r in store.base_markers if r.latitude < -22.0]
        assert len(rio) == 8

    def test_get_by_kind(self, store):
        """get() returns the same tuple as the named accessors."""
        assert store.get(MarkerKind.BASE) is store.base_markers
        assert store.get("wallet") is store.wallet_markers

    def test_get_unknown_kind(self, store):
        """Unknown kinds are rejected."""
        with pytest.raises(ValueError):
            store.get("satellite")

    def test_same_seed_same_coordinates(self):
        """A fixed seed reproduces the same coordinates."""
        assert MarkerStore.create(seed=99).base_markers == MarkerStore.create(seed=99).base_markers

    def test_unseeded_stores_differ(self):
        """Coordinates are randomized per store, not fixed in the tables."""
        first = MarkerStore.create(rng=random.Random(1))
        second = MarkerStore.create(rng=random.Random(2))
        assert first.wallet_markers != second.wallet_markers

    def test_serialize_is_stable(self, store):
        """Repeated reads return byte-identical payloads."""
        assert store.serialize(MarkerKind.WALLET) == store.serialize(MarkerKind.WALLET)

    def test_serialize_fields(self, store):
        """Serialized records carry the wire field names."""
        payload = json.loads(store.serialize(MarkerKind.BASE))

        assert len(payload) == 22
        for record in payload:
            assert set(record) == {"network", "identity", "latitude", "longitude", "label"}
            assert isinstance(record["latitude"], float)
            assert isinstance(record["longitude"], float)

    def test_records_are_frozen(self, store):
        """Records cannot be modified after startup."""
        with pytest.raises(ValidationError):
            store.base_markers[0].latitude = 0.0

    def test_serialize_rejects_non_finite(self):
        """Non-finite coordinates fail serialization instead of emitting invalid JSON."""
        record = LocationRecord(
            network="Stellar", identity="GNAN", latitude=float("nan"), longitude=0.0, label="bad"
        )
        store = MarkerStore(base_markers=(record,), wallet_markers=())

        with pytest.raises(ValueError):
            store.serialize(MarkerKind.BASE)
