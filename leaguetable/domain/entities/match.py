from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from ..value_objects.ids import MatchId, PlayerId
from ._time import as_utc, utc_now


class Match(BaseModel):
    """A recorded result between two players.

    Side order matters for score attribution only. Distinct sides are checked
    by the service layer when recording and by the engine when folding.
    """

    id: MatchId = Field(..., description="Opaque match identity")
    player1_id: PlayerId = Field(..., description="First side")
    player2_id: PlayerId = Field(..., description="Second side")
    player1_score: StrictInt = Field(..., ge=0, description="Goals scored by player1")
    player2_score: StrictInt = Field(..., ge=0, description="Goals scored by player2")
    match_date: datetime = Field(default_factory=utc_now, description="When the match was played")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("match_date", "created_at", "updated_at")
    @classmethod
    def _ensure_utc(cls, v: datetime | None) -> datetime | None:
        if v is None:
            return None
        return as_utc(v)
