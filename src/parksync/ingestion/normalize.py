"""Normalization helpers.

Centralizes defensive parsing of sensor records. Everything in this module is
total: malformed input degrades to a default, it never raises.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from parksync._constants import DEFAULT_DISTANCE_CM, DISTANCE_FIELD, STATUS_FIELD, UNKNOWN_STATUS
from parksync.models.spot import Spot


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_str(value: Any) -> str | None:
    """Return *value* only if it already is a string."""
    if isinstance(value, str):
        return value
    return None


def non_negative_or_zero(value: Any) -> float:
    parsed = safe_float(value)
    if parsed is None or parsed < 0:
        return DEFAULT_DISTANCE_CM
    # Adding 0.0 turns -0.0 into 0.0.
    return parsed + 0.0


def normalize_spot(raw_record: Any, spot_id: Any) -> Spot:
    """Convert one raw sensor record into a :class:`Spot`.

    - ``distance`` missing, non-numeric, negative or non-finite -> ``0``.
    - ``status`` missing or not a string -> ``"UNKNOWN"``; any string is kept
      verbatim.
    - Unrecognised fields are ignored; a record that is not a mapping at all
      is treated as empty.
    """

    record: Mapping[Any, Any] = raw_record if isinstance(raw_record, Mapping) else {}

    status = safe_str(record.get(STATUS_FIELD))
    return Spot(
        id=str(spot_id),
        distance_cm=non_negative_or_zero(record.get(DISTANCE_FIELD)),
        status=UNKNOWN_STATUS if status is None else status,
    )
