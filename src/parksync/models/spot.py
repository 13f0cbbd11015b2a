"""Parking spot entity."""

from __future__ import annotations

from pydantic import Field, computed_field

from parksync._constants import AVAILABLE_STATUS, DEFAULT_DISTANCE_CM, UNKNOWN_STATUS
from parksync.models._base import ParkSyncBaseModel


def is_available_status(status: str) -> bool:
    """Return ``True`` when *status* is ``AVAILABLE`` in any letter case.

    Every other token, including ``UNKNOWN`` and typos, counts as occupied.
    """
    return status.upper() == AVAILABLE_STATUS


class Spot(ParkSyncBaseModel):
    """A single parking space's observed state.

    Instances are produced by :func:`parksync.ingestion.normalize.normalize_spot`,
    which guarantees every field is already well-typed. Spots are shared by
    every reader of a published state, so they hold only immutable values and
    are hashable.
    """

    id: str
    distance_cm: float = Field(default=DEFAULT_DISTANCE_CM, ge=0.0)
    """Sensor-reported clearance distance in centimeters."""
    status: str = UNKNOWN_STATUS
    """Status token as received (``AVAILABLE``, ``OCCUPIED``, ...)."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_available(self) -> bool:
        return is_available_status(self.status)

    @property
    def display_id(self) -> str:
        """Identifier as shown to users (identifiers compare case-insensitively)."""
        return self.id.upper()

    @property
    def display_status(self) -> str:
        return self.status.upper()
