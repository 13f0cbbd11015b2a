"""Typed entity models for parksync."""

from parksync.models.lot import LotAggregates, LotState
from parksync.models.spot import Spot, is_available_status

__all__ = [
    "LotAggregates",
    "LotState",
    "Spot",
    "is_available_status",
]
