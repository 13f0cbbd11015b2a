"""Lot monitor: one feed wired to one store."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from parksync._mqtt import MqttSnapshotFeed
from parksync.config import ParkSyncConfig
from parksync.feed import SnapshotFeed
from parksync.state.store import SpotStore

_logger = logging.getLogger(__name__)


class LotMonitor:
    """Owns the reconciliation store for one lot and its feed subscription.

    Construct one at process start and hand it (or its :attr:`store`) to
    consumers.

    Usage::

        async with LotMonitor.from_config(ParkSyncConfig.from_env()) as monitor:
            monitor.store.subscribe(on_update)
            ...
    """

    def __init__(self, feed: SnapshotFeed, *, store: SpotStore | None = None) -> None:
        self._feed = feed
        self._store = store if store is not None else SpotStore()
        self._started = False

    @classmethod
    def from_config(cls, config: ParkSyncConfig, *, store: SpotStore | None = None) -> LotMonitor:
        """Build a monitor backed by an MQTT snapshot feed."""
        try:
            loop: asyncio.AbstractEventLoop | None = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        return cls(MqttSnapshotFeed(config, loop=loop, logger=_logger), store=store)

    @property
    def store(self) -> SpotStore:
        return self._store

    @property
    def feed(self) -> SnapshotFeed:
        return self._feed

    @property
    def is_started(self) -> bool:
        return self._started

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Subscribe the store to the feed. Calling twice is a no-op."""
        if self._started:
            return
        loop = asyncio.get_running_loop()
        # Feed start may block on network setup.
        await loop.run_in_executor(None, self._feed.start, self._store.apply_snapshot)
        self._started = True
        _logger.debug("Lot monitor started")

    async def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._feed.stop)
        _logger.debug("Lot monitor stopped at revision %d", self._store.revision)

    async def __aenter__(self) -> LotMonitor:
        await self.start()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.stop()
