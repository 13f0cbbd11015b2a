"""Lot-level derived models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, computed_field

from parksync.models._base import ParkSyncBaseModel
from parksync.models.spot import Spot


class LotAggregates(ParkSyncBaseModel):
    """Aggregate counters derived from one reconciled spot collection."""

    available_count: int = 0
    occupied_count: int = 0
    total_count: int = 0
    occupancy_ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    """``occupied_count / total_count``, or ``0`` for an empty lot."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_full(self) -> bool:
        # An empty lot is not "full"; it has no spots to fill.
        return self.total_count > 0 and self.occupied_count == self.total_count


class LotState(ParkSyncBaseModel):
    """One fully reconciled store state.

    The store swaps whole ``LotState`` instances, so spots and aggregates read
    from the same instance always describe the same snapshot.
    """

    revision: int
    spots: tuple[Spot, ...] = ()
    aggregates: LotAggregates = Field(default_factory=LotAggregates)
    received_at: datetime
