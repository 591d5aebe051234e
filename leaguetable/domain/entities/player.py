from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..value_objects.ids import PlayerId, TeamId
from ._time import as_utc, utc_now


class Player(BaseModel):
    """A registered competitor.

    ``team_id`` is a weak reference: the team may be deleted independently,
    in which case the reference is cleared rather than the player removed.
    """

    id: PlayerId = Field(..., description="Opaque player identity")
    name: str = Field(..., min_length=1, description="Display name")
    team_id: TeamId | None = Field(default=None, description="Optional team reference")
    created_at: datetime = Field(default_factory=utc_now)

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("created_at")
    @classmethod
    def _ensure_utc(cls, v: datetime) -> datetime:
        return as_utc(v)
