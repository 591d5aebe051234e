from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.ids import MatchId, PlayerId


class PositionSnapshot(BaseModel):
    """Table positions of every roster player right after one match."""

    match_index: int = Field(..., ge=1, description="1-based position in the chronological match log")
    match_id: MatchId
    timestamp: str = Field(..., description="ISO-8601 match date")
    positions: dict[PlayerId, int] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
