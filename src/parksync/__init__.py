"""parksync - Real-time reconciliation of parking-spot sensor snapshots."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("parksync")
except PackageNotFoundError:
    __version__ = "0+local"
from parksync.config import ParkSyncConfig
from parksync.exceptions import (
    FeedError,
    FeedPayloadError,
    ParkSyncConfigError,
    ParkSyncError,
)
from parksync.feed import SnapshotFeed, StaticFeed
from parksync.ingestion import normalize_snapshot, normalize_spot
from parksync.models import LotAggregates, LotState, Spot
from parksync.monitor import LotMonitor
from parksync.state.events import LotUpdate
from parksync.state.store import SpotStore

__all__ = [
    "__version__",
    "FeedError",
    "FeedPayloadError",
    "LotAggregates",
    "LotMonitor",
    "LotState",
    "LotUpdate",
    "ParkSyncConfig",
    "ParkSyncConfigError",
    "ParkSyncError",
    "SnapshotFeed",
    "Spot",
    "SpotStore",
    "StaticFeed",
    "normalize_snapshot",
    "normalize_spot",
]
