"""Reconciliation store.

This is the only component allowed to change the spot collection. Each feed
delivery replaces the collection wholesale; nothing is merged key-by-key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from parksync.ingestion.snapshot import normalize_snapshot
from parksync.models.lot import LotAggregates, LotState
from parksync.models.spot import Spot
from parksync.state.events import LotUpdate
from parksync.state.policy import compute_aggregates, sort_spots

_logger = logging.getLogger(__name__)

LotListener = Callable[[LotUpdate], None]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SpotStore:
    """In-memory store for the reconciled spot collection.

    The store has a single writer (the feed callback) and any number of
    readers. ``apply_snapshot`` builds a complete :class:`LotState` off to
    the side and publishes it with one attribute assignment, so a reader
    sees either the previous snapshot or the new one, never a mix.

    Usage::

        store = SpotStore()
        store.subscribe(lambda update: redraw(store.current_spots()))
        store.apply_snapshot({"a1": {"distance": 100, "status": "AVAILABLE"}})
        store.aggregates().occupancy_ratio
    """

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._state: LotState | None = None
        self._revision = 0
        self._listeners: list[LotListener] = []

    @property
    def state(self) -> LotState | None:
        """The installed state, or ``None`` while no snapshot has arrived."""
        return self._state

    @property
    def has_data(self) -> bool:
        """``False`` until the first non-null snapshot ("no data yet")."""
        return self._state is not None

    @property
    def revision(self) -> int:
        """Number of snapshots installed so far."""
        return self._revision

    def subscribe(self, listener: LotListener) -> Callable[[], None]:
        """Register *listener* for change notifications.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def apply_snapshot(self, raw_collection: Any = None) -> LotState | None:
        """Replace the spot collection with a freshly normalized snapshot.

        ``None`` means the feed has no data yet: the previous state is kept,
        the revision does not advance and no notification fires.
        """
        spots = normalize_snapshot(raw_collection)
        if spots is None:
            _logger.debug("No snapshot data; keeping revision %d", self._revision)
            return None

        ordered = sort_spots(spots.values())
        state = LotState(
            revision=self._revision + 1,
            spots=ordered,
            aggregates=compute_aggregates(ordered),
            received_at=self._clock(),
        )
        # Single-step publish; readers only ever hold complete states.
        self._state = state
        self._revision = state.revision
        _logger.debug(
            "Installed revision %d: %d spots, %d available",
            state.revision,
            state.aggregates.total_count,
            state.aggregates.available_count,
        )

        self._notify(
            LotUpdate(
                revision=state.revision,
                total_count=state.aggregates.total_count,
                available_count=state.aggregates.available_count,
                received_at=state.received_at,
            )
        )
        return state

    def _notify(self, update: LotUpdate) -> None:
        for listener in list(self._listeners):
            try:
                listener(update)
            except Exception:
                _logger.debug("Lot listener failed for revision %d", update.revision, exc_info=True)

    def current_spots(self) -> tuple[Spot, ...]:
        """Spots of the installed state, sorted by identifier."""
        state = self._state
        if state is None:
            return ()
        return state.spots

    def aggregates(self) -> LotAggregates:
        """Aggregates of the installed state (all zero before any data)."""
        state = self._state
        if state is None:
            return LotAggregates()
        return state.aggregates

    def get_spot(self, spot_id: str) -> Spot | None:
        """Look up a spot; identifiers compare case-insensitively."""
        spots = self.current_spots()
        for spot in spots:
            if spot.id == spot_id:
                return spot
        wanted = spot_id.casefold()
        for spot in spots:
            if spot.id.casefold() == wanted:
                return spot
        return None
