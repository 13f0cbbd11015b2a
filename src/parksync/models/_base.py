"""Base model for parksync entities.

Every entity inherits from :class:`ParkSyncBaseModel` which provides:

* ``frozen=True`` so a published entity can be shared with any number of
  readers without copying.
* ``alias_generator=to_camel`` so dumps for display consumers can use the
  camelCase keys (``distanceCm``, ``occupancyRatio``) with ``by_alias=True``.
* ``extra="ignore"`` so unrecognised sensor fields never fail validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ParkSyncBaseModel(BaseModel):
    """Base for parksync entity models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
