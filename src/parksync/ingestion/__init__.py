"""Ingestion layer.

This package turns raw feed deliveries into normalized, typed spot entities.
It is the only place where untyped sensor records are tolerated.
"""

from parksync.ingestion.normalize import normalize_spot
from parksync.ingestion.snapshot import normalize_snapshot

__all__ = ["normalize_snapshot", "normalize_spot"]
