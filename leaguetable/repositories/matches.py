from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from leaguetable.domain.entities import Match


class MatchesRepo(ABC):
    """Abstract repository interface for :class:`Match` entities."""

    @abstractmethod
    def get_by_id(self, match_id: str) -> Optional[Match]:
        """Return a match by its identifier if present."""

    @abstractmethod
    def list_all(self) -> list[Match]:
        """List every match in insertion order."""

    @abstractmethod
    def insert(self, match: Match) -> None:
        """Persist a new match."""

    @abstractmethod
    def update(self, match: Match) -> None:
        """Overwrite every mutable field of an existing match."""

    @abstractmethod
    def delete_for_player(self, player_id: str) -> int:
        """Remove every match naming ``player_id`` on either side; return the count."""

    @abstractmethod
    def delete_all(self) -> int:
        """Remove every match; return the count."""
