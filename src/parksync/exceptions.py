"""Custom exception hierarchy for parksync.

The reconciliation core never raises on malformed feed data; these
exceptions belong to the configuration and feed adapter layers.
"""

from __future__ import annotations


class ParkSyncError(Exception):
    """Base exception for all parksync errors."""


class ParkSyncConfigError(ParkSyncError):
    """Invalid or missing configuration."""


class FeedError(ParkSyncError):
    """Feed adapter failure (subscription, connection, lifecycle)."""

    def __init__(self, message: str, *, topic: str = "") -> None:
        self.topic = topic
        super().__init__(message)


class FeedPayloadError(FeedError):
    """A feed delivery could not be decoded into a snapshot."""
