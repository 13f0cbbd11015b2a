"""Shared constants for the spot feed."""

from __future__ import annotations

# Record fields recognised by the normalizer; everything else is ignored.
DISTANCE_FIELD = "distance"
STATUS_FIELD = "status"

# Status tokens. Only AVAILABLE (case-insensitive) means the spot is free.
AVAILABLE_STATUS = "AVAILABLE"
UNKNOWN_STATUS = "UNKNOWN"

DEFAULT_DISTANCE_CM = 0.0
