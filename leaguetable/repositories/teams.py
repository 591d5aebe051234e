from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from leaguetable.domain.entities import Team


class TeamsRepo(ABC):
    """Repository interface for teams."""

    @abstractmethod
    def get_by_id(self, team_id: str) -> Optional[Team]:
        """Retrieve a team by identifier."""

    @abstractmethod
    def list_all(self) -> list[Team]:
        """List all teams in creation order."""

    @abstractmethod
    def insert(self, team: Team) -> None:
        """Persist a new team."""

    @abstractmethod
    def update(self, team: Team) -> None:
        """Update an existing team."""

    @abstractmethod
    def delete(self, team_id: str) -> None:
        """Remove a team by identifier."""
