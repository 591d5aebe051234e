from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from leaguetable.domain.entities import Player


class PlayersRepo(ABC):
    """Repository interface for players."""

    @abstractmethod
    def get_by_id(self, player_id: str) -> Optional[Player]:
        """Retrieve a player by identifier."""

    @abstractmethod
    def list_all(self) -> list[Player]:
        """List all players in registration order."""

    @abstractmethod
    def insert(self, player: Player) -> None:
        """Persist a new player."""

    @abstractmethod
    def update(self, player: Player) -> None:
        """Update name and team of an existing player."""

    @abstractmethod
    def delete(self, player_id: str) -> None:
        """Remove a player by identifier."""

    @abstractmethod
    def clear_team(self, team_id: str) -> int:
        """Unset ``team_id`` on every player pointing at it; return how many changed."""
