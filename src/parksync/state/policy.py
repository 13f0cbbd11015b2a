"""Aggregate derivation.

Pure functions over a spot collection; the store calls them once per
installed snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable

from parksync.models.lot import LotAggregates
from parksync.models.spot import Spot


def compute_aggregates(spots: Iterable[Spot]) -> LotAggregates:
    """Count available/occupied spots in a single pass."""
    total = 0
    available = 0
    for spot in spots:
        total += 1
        if spot.is_available:
            available += 1

    occupied = total - available
    return LotAggregates(
        available_count=available,
        occupied_count=occupied,
        total_count=total,
        occupancy_ratio=occupied / total if total else 0.0,
    )


def sort_spots(spots: Iterable[Spot]) -> tuple[Spot, ...]:
    """Order spots for display: lexicographic on the stored identifier."""
    return tuple(sorted(spots, key=lambda spot: spot.id))
