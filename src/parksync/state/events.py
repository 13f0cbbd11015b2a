"""Store change notifications."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class LotUpdate(BaseModel):
    """Emitted once after each completed ``apply_snapshot``.

    By the time listeners receive it the new state is already installed, so
    they can read the store directly.
    """

    model_config = ConfigDict(frozen=True)

    revision: int = Field(..., ge=1, description="Store revision that was installed")
    total_count: int = Field(default=0, ge=0)
    available_count: int = Field(default=0, ge=0)
    received_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
