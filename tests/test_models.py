"""Tests for the spot and lot entity models."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from parksync.ingestion.normalize import normalize_spot
from parksync.models.lot import LotAggregates, LotState
from parksync.models.spot import Spot, is_available_status
from parksync.state.policy import compute_aggregates, sort_spots


class TestSpot:
    def test_frozen(self) -> None:
        spot = Spot(id="a1", distance_cm=3.0, status="AVAILABLE")
        with pytest.raises(ValidationError):
            spot.status = "OCCUPIED"  # type: ignore[misc]

    def test_negative_distance_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Spot(id="a1", distance_cm=-1.0)

    def test_display_dump_uses_camel_case(self) -> None:
        dumped = Spot(id="a1", distance_cm=12.5, status="OCCUPIED").model_dump(by_alias=True)

        assert dumped["id"] == "a1"
        assert dumped["distanceCm"] == 12.5
        assert dumped["status"] == "OCCUPIED"

    def test_is_available_included_in_dump(self) -> None:
        dumped = Spot(id="a1", status="available").model_dump()

        assert dumped["is_available"] is True

    def test_hashable_and_equal_by_value(self) -> None:
        first = normalize_spot({"status": "AVAILABLE", "battery": 87}, "a1")
        second = normalize_spot({"status": "AVAILABLE"}, "a1")

        assert hash(first) == hash(second)
        assert {first, second} == {first}

    def test_display_fields_upper_cased(self) -> None:
        spot = Spot(id="b2", status="Occupied")

        assert spot.display_id == "B2"
        assert spot.display_status == "OCCUPIED"
        assert spot.status == "Occupied"

    @pytest.mark.parametrize("status", ["OCCUPIED", "UNKNOWN", "", "AVAILABLE ", "free"])
    def test_other_tokens_count_as_occupied(self, status: str) -> None:
        assert is_available_status(status) is False


class TestAggregates:
    def test_empty_collection(self) -> None:
        agg = compute_aggregates([])

        assert agg == LotAggregates()
        assert agg.occupancy_ratio == 0
        assert agg.is_full is False

    def test_counts_and_ratio(self) -> None:
        spots = [
            Spot(id="a", status="AVAILABLE"),
            Spot(id="b", status="OCCUPIED"),
            Spot(id="c", status="UNKNOWN"),
            Spot(id="d", status="Available"),
        ]

        agg = compute_aggregates(spots)

        assert agg.available_count == 2
        assert agg.occupied_count == 2
        assert agg.total_count == 4
        assert agg.occupancy_ratio == 0.5
        assert agg.is_full is False

    def test_accepts_single_pass_iterables(self) -> None:
        agg = compute_aggregates(Spot(id=str(i), status="OCCUPIED") for i in range(3))

        assert agg.total_count == 3
        assert agg.is_full is True

    def test_sort_spots_by_identifier(self) -> None:
        ordered = sort_spots([Spot(id="b"), Spot(id="B"), Spot(id="a")])

        assert [spot.id for spot in ordered] == ["B", "a", "b"]


def test_lot_state_defaults() -> None:
    state = LotState(revision=1, received_at=datetime(2026, 1, 1, tzinfo=UTC))

    assert state.spots == ()
    assert state.aggregates.total_count == 0


def test_lot_state_hashable() -> None:
    received_at = datetime(2026, 1, 1, tzinfo=UTC)
    spots = (normalize_spot({"status": "AVAILABLE"}, "a1"),)
    state = LotState(revision=1, spots=spots, aggregates=compute_aggregates(spots), received_at=received_at)

    assert hash(state) == hash(LotState(revision=1, spots=spots, aggregates=compute_aggregates(spots), received_at=received_at))
