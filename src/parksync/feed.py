"""Feed subscription boundary.

A feed pushes the complete lot snapshot every time any spot changes. The
store's owner injects one into :class:`parksync.monitor.LotMonitor`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

SnapshotCallback = Callable[[Any], None]
"""Receives one raw delivery: ``None`` (no data yet) or a spot collection."""


class SnapshotFeed(Protocol):
    def start(self, on_snapshot: SnapshotCallback) -> None: ...

    def stop(self) -> None: ...


class StaticFeed:
    """In-process feed that delivers snapshots pushed by the caller.

    Useful for replaying recorded snapshots and for tests.
    """

    def __init__(self) -> None:
        self._callback: SnapshotCallback | None = None

    @property
    def is_running(self) -> bool:
        return self._callback is not None

    def start(self, on_snapshot: SnapshotCallback) -> None:
        self._callback = on_snapshot

    def stop(self) -> None:
        self._callback = None

    def push(self, raw_collection: Any) -> None:
        """Deliver *raw_collection*; dropped silently while stopped."""
        callback = self._callback
        if callback is not None:
            callback(raw_collection)
