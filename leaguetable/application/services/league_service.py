from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from uuid import uuid4

from pydantic import ValidationError

from leaguetable.config.settings import RECENT_MATCHES_LIMIT, settings
from leaguetable.domain.entities import Match, Player, PlayerStatistics, PositionSnapshot, Team
from leaguetable.domain.errors import InvalidInputError, NotFoundError
from leaguetable.repositories.matches import MatchesRepo
from leaguetable.repositories.players import PlayersRepo
from leaguetable.repositories.teams import TeamsRepo
from leaguetable.standings import compute_position_trend, compute_standings

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid4().hex


def _build(model: type, data: dict[str, Any]) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputError(str(exc)) from exc


class LeagueService:
    """Request-layer facade over the entity store and the standings engine.

    Responsibilities:
    - Validate requests before anything is written (existing, distinct players;
      non-negative integer scores; non-blank names).
    - Apply deletion cascades: removing a player removes its matches, removing
      a team clears the team reference on its players.
    - Read a roster and match log snapshot and hand it to the pure engine for
      standings and the position trend.

    Repositories default to SQLite adapters on ``settings.db_path``.
    """

    def __init__(
        self,
        players: Optional[PlayersRepo] = None,
        teams: Optional[TeamsRepo] = None,
        matches: Optional[MatchesRepo] = None,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        if players is None or teams is None or matches is None:
            # Lazy import so tests injecting fakes never touch the database file
            from leaguetable.repositories.sqlite import (
                MatchesRepoSqlite,
                PlayersRepoSqlite,
                TeamsRepoSqlite,
                connect,
            )

            conn = connect(settings.db_path)
            players = players or PlayersRepoSqlite(conn)
            teams = teams or TeamsRepoSqlite(conn)
            matches = matches or MatchesRepoSqlite(conn)
        self._players = players
        self._teams = teams
        self._matches = matches
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._new_id = id_factory or _new_id

    # --------------------------- Reads ---------------------------
    def list_players(self) -> list[Player]:
        return self._players.list_all()

    def list_teams(self) -> list[Team]:
        return self._teams.list_all()

    def list_matches(self) -> list[Match]:
        return self._matches.list_all()

    def recent_matches(self, limit: int = RECENT_MATCHES_LIMIT) -> list[Match]:
        """Return up to ``limit`` matches, most recently played first."""
        if limit < 0:
            raise InvalidInputError("limit must be non-negative")
        ordered = sorted(self._matches.list_all(), key=lambda m: m.match_date, reverse=True)
        return ordered[:limit]

    def standings(self) -> list[PlayerStatistics]:
        return compute_standings(self._players.list_all(), self._matches.list_all())

    def position_trend(self) -> list[PositionSnapshot]:
        return compute_position_trend(self._players.list_all(), self._matches.list_all())

    # --------------------------- Teams ---------------------------
    def create_team(self, name: str) -> Team:
        team: Team = _build(Team, {"id": self._new_id(), "name": name, "created_at": self._clock()})
        self._teams.insert(team)
        logger.info("Team created", extra={"team_id": team.id, "team_name": team.name})
        return team

    def rename_team(self, team_id: str, name: str) -> Team:
        current = self._require_team(team_id)
        team: Team = _build(Team, {**current.model_dump(), "name": name})
        self._teams.update(team)
        logger.info("Team renamed", extra={"team_id": team.id, "team_name": team.name})
        return team

    def delete_team(self, team_id: str) -> int:
        """Delete a team and detach its players; return how many players were detached."""
        self._require_team(team_id)
        self._teams.delete(team_id)
        detached = self._players.clear_team(team_id)
        logger.info("Team deleted", extra={"team_id": team_id, "players_detached": detached})
        return detached

    # --------------------------- Players ---------------------------
    def register_player(self, name: str, team_id: Optional[str] = None) -> Player:
        if team_id is not None:
            self._require_team(team_id)
        player: Player = _build(
            Player,
            {"id": self._new_id(), "name": name, "team_id": team_id, "created_at": self._clock()},
        )
        self._players.insert(player)
        logger.info("Player registered", extra={"player_id": player.id, "team_id": team_id})
        return player

    def update_player(
        self,
        player_id: str,
        *,
        name: Optional[str] = None,
        team_id: Optional[str] = None,
        clear_team: bool = False,
    ) -> Player:
        """Rename and/or move a player to another team (or to no team)."""
        if team_id is not None and clear_team:
            raise InvalidInputError("team_id and clear_team are mutually exclusive")
        current = self._require_player(player_id)
        data = current.model_dump()
        if name is not None:
            data["name"] = name
        if team_id is not None:
            self._require_team(team_id)
            data["team_id"] = team_id
        elif clear_team:
            data["team_id"] = None
        player: Player = _build(Player, data)
        self._players.update(player)
        logger.info("Player updated", extra={"player_id": player.id, "team_id": player.team_id})
        return player

    def delete_player(self, player_id: str) -> int:
        """Delete a player and every match naming it; return the number of matches removed."""
        self._require_player(player_id)
        self._players.delete(player_id)
        removed = self._matches.delete_for_player(player_id)
        logger.info("Player deleted", extra={"player_id": player_id, "matches_removed": removed})
        return removed

    # --------------------------- Matches ---------------------------
    def record_match(
        self,
        player1_id: str,
        player2_id: str,
        player1_score: int,
        player2_score: int,
        match_date: Optional[datetime] = None,
    ) -> Match:
        self._require_pair(player1_id, player2_id)
        now = self._clock()
        match: Match = _build(
            Match,
            {
                "id": self._new_id(),
                "player1_id": player1_id,
                "player2_id": player2_id,
                "player1_score": player1_score,
                "player2_score": player2_score,
                "match_date": match_date or now,
                "created_at": now,
            },
        )
        self._matches.insert(match)
        logger.info(
            "Match recorded",
            extra={
                "match_id": match.id,
                "score": f"{match.player1_score}-{match.player2_score}",
            },
        )
        return match

    def correct_match(
        self,
        match_id: str,
        *,
        player1_id: Optional[str] = None,
        player2_id: Optional[str] = None,
        player1_score: Optional[int] = None,
        player2_score: Optional[int] = None,
        match_date: Optional[datetime] = None,
    ) -> Match:
        """Overwrite any subset of a match's fields; unspecified fields are kept."""
        current = self._matches.get_by_id(match_id)
        if current is None:
            raise NotFoundError("match", match_id)
        data = current.model_dump()
        changes = {
            "player1_id": player1_id,
            "player2_id": player2_id,
            "player1_score": player1_score,
            "player2_score": player2_score,
            "match_date": match_date,
        }
        data.update({k: v for k, v in changes.items() if v is not None})
        self._require_pair(data["player1_id"], data["player2_id"])
        data["updated_at"] = self._clock()
        match: Match = _build(Match, data)
        self._matches.update(match)
        logger.info("Match corrected", extra={"match_id": match.id})
        return match

    def reset_league(self) -> int:
        """Delete every match; players and teams are kept."""
        removed = self._matches.delete_all()
        logger.warning("League reset", extra={"matches_removed": removed})
        return removed

    # --------------------------- Helpers ---------------------------
    def _require_player(self, player_id: str) -> Player:
        player = self._players.get_by_id(player_id)
        if player is None:
            raise NotFoundError("player", player_id)
        return player

    def _require_team(self, team_id: str) -> Team:
        team = self._teams.get_by_id(team_id)
        if team is None:
            raise NotFoundError("team", team_id)
        return team

    def _require_pair(self, player1_id: str, player2_id: str) -> None:
        if player1_id == player2_id:
            raise InvalidInputError("a match needs two different players")
        self._require_player(player1_id)
        self._require_player(player2_id)
