"""Helpers for compact debug logging of feed snapshots.

A whole-lot snapshot can be large and sensor records may carry long free-form
strings, so payloads are shortened before they reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def redact_for_log(value: Any, *, max_string: int = 512, max_items: int = 50, _depth: int = 0) -> Any:
    """Return a shortened copy of *value*: long strings truncated, containers capped."""
    if _depth > 20:
        return "<max-depth>"

    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"

    if value is None or isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    kwargs = {"max_string": max_string, "max_items": max_items, "_depth": _depth + 1}
    if isinstance(value, Mapping):
        shortened = {str(k): redact_for_log(v, **kwargs) for k, v in list(value.items())[:max_items]}
        if len(value) > max_items:
            shortened["…"] = f"<{len(value) - max_items} more>"
        return shortened

    if isinstance(value, Sequence):
        items = [redact_for_log(v, **kwargs) for v in value[:max_items]]
        if len(value) > max_items:
            items.append(f"<{len(value) - max_items} more>")
        return items

    return repr(value)
