"""Snapshot ingestion.

Translates one opaque feed delivery ("all spots under the lot") into a fresh
``id -> Spot`` mapping. The store installs the result wholesale; nothing here
looks at previous state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from parksync._redact import redact_for_log
from parksync.ingestion.normalize import normalize_spot
from parksync.models.spot import Spot

_logger = logging.getLogger(__name__)


def iter_snapshot_entries(raw_collection: Any) -> Iterator[tuple[str, Any]] | None:
    """Return ``(spot_id, raw_record)`` pairs for a feed delivery.

    Returns ``None`` when the delivery carries no data. Realtime databases
    deliver children with integer keys as a JSON array, so lists are read as a
    mapping from ``str(index)``.
    """

    if raw_collection is None:
        return None
    if isinstance(raw_collection, Mapping):
        return ((str(key), value) for key, value in raw_collection.items())
    if isinstance(raw_collection, (list, tuple)):
        return ((str(index), value) for index, value in enumerate(raw_collection))

    _logger.debug(
        "Ignoring snapshot of unsupported type %s: %s",
        type(raw_collection).__name__,
        redact_for_log(raw_collection, max_string=64),
    )
    return None


def normalize_snapshot(raw_collection: Any) -> dict[str, Spot] | None:
    """Normalize a complete feed delivery into a new spot mapping.

    Entries whose value is ``None`` are not-yet-populated or removed children
    and are skipped. Returns ``None`` for "no data yet", which is distinct from
    an empty mapping (a populated lot with zero spots).
    """

    entries = iter_snapshot_entries(raw_collection)
    if entries is None:
        return None

    spots: dict[str, Spot] = {}
    skipped = 0
    for spot_id, raw_record in entries:
        if raw_record is None:
            skipped += 1
            continue
        spots[spot_id] = normalize_spot(raw_record, spot_id)

    if skipped:
        _logger.debug("Skipped %d empty snapshot entries", skipped)
    return spots
