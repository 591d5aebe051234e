from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..value_objects.ids import PlayerId, TeamId


class PlayerStatistics(BaseModel):
    """Derived league-table row for one player. Never persisted."""

    player_id: PlayerId
    player_name: str
    team_id: TeamId | None = None
    matches_played: int = Field(0, ge=0)
    wins: int = Field(0, ge=0)
    draws: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    goals_for: int = Field(0, ge=0)
    goals_against: int = Field(0, ge=0)
    goal_difference: int = 0
    points: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_totals(self) -> "PlayerStatistics":
        if self.goal_difference != self.goals_for - self.goals_against:
            raise ValueError("goal_difference must equal goals_for - goals_against")
        if self.wins + self.draws + self.losses != self.matches_played:
            raise ValueError("wins + draws + losses must equal matches_played")
        return self
