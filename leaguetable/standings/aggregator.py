"""Fold a match log into one statistics record per roster player.

The fold is commutative across matches: each match touches exactly two
independent tallies, and both are updated in the same step. Matches that
name a player missing from the roster are skipped without error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, MutableMapping

from leaguetable.domain.entities import Match, Player, PlayerStatistics
from leaguetable.domain.errors import InvalidInputError
from leaguetable.domain.value_objects.enums import MatchOutcome, SideResult
from leaguetable.domain.value_objects.ids import PlayerId, TeamId

POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1
POINTS_FOR_LOSS = 0

_POINTS: dict[SideResult, int] = {
    SideResult.WIN: POINTS_FOR_WIN,
    SideResult.DRAW: POINTS_FOR_DRAW,
    SideResult.LOSS: POINTS_FOR_LOSS,
}

# (player1 result, player2 result) per outcome
_SIDES: dict[MatchOutcome, tuple[SideResult, SideResult]] = {
    MatchOutcome.PLAYER1: (SideResult.WIN, SideResult.LOSS),
    MatchOutcome.DRAW: (SideResult.DRAW, SideResult.DRAW),
    MatchOutcome.PLAYER2: (SideResult.LOSS, SideResult.WIN),
}


@dataclass
class StatsTally:
    """Mutable accumulator for one player while a fold is in progress."""

    player_id: PlayerId
    player_name: str
    team_id: TeamId | None = None
    matches_played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0

    @classmethod
    def for_player(cls, player: Player) -> "StatsTally":
        return cls(player_id=player.id, player_name=player.name, team_id=player.team_id)

    def record(self, scored: int, conceded: int, result: SideResult) -> None:
        self.matches_played += 1
        self.goals_for += scored
        self.goals_against += conceded
        if result is SideResult.WIN:
            self.wins += 1
        elif result is SideResult.DRAW:
            self.draws += 1
        else:
            self.losses += 1
        self.points += _POINTS[result]
        # derived, never accumulated on its own
        self.goal_difference = self.goals_for - self.goals_against

    def freeze(self) -> PlayerStatistics:
        return PlayerStatistics(
            player_id=self.player_id,
            player_name=self.player_name,
            team_id=self.team_id,
            matches_played=self.matches_played,
            wins=self.wins,
            draws=self.draws,
            losses=self.losses,
            goals_for=self.goals_for,
            goals_against=self.goals_against,
            goal_difference=self.goal_difference,
            points=self.points,
        )


def match_outcome(match: Match) -> MatchOutcome:
    """Classify a result; exactly one outcome holds for any pair of scores."""
    if match.player1_score > match.player2_score:
        return MatchOutcome.PLAYER1
    if match.player1_score < match.player2_score:
        return MatchOutcome.PLAYER2
    return MatchOutcome.DRAW


def new_tallies(players: Iterable[Player]) -> dict[PlayerId, StatsTally]:
    """Return zeroed tallies keyed by player identity, in roster order."""
    tallies: dict[PlayerId, StatsTally] = {}
    for player in players:
        if player.id in tallies:
            raise InvalidInputError(f"duplicate player identity in roster: {player.id}")
        tallies[player.id] = StatsTally.for_player(player)
    return tallies


def apply_match(tallies: MutableMapping[PlayerId, StatsTally], match: Match) -> bool:
    """Fold one match into ``tallies``.

    Both sides are updated together or not at all. Returns ``False`` (and
    changes nothing) when either side is missing from ``tallies``.

    Raises:
        InvalidInputError: if both sides name the same player.
    """
    if match.player1_id == match.player2_id:
        raise InvalidInputError(f"match {match.id} names player {match.player1_id} on both sides")

    side1 = tallies.get(match.player1_id)
    side2 = tallies.get(match.player2_id)
    if side1 is None or side2 is None:
        return False

    result1, result2 = _SIDES[match_outcome(match)]
    side1.record(match.player1_score, match.player2_score, result1)
    side2.record(match.player2_score, match.player1_score, result2)
    return True


def aggregate(
    players: Iterable[Player], matches: Iterable[Match]
) -> dict[PlayerId, PlayerStatistics]:
    """Return one :class:`PlayerStatistics` per roster player.

    >>> from datetime import datetime, timezone
    >>> roster = [Player(id="a", name="Ann"), Player(id="b", name="Bob")]
    >>> played = [Match(id="m1", player1_id="a", player2_id="b",
    ...                 player1_score=3, player2_score=1,
    ...                 match_date=datetime(2024, 5, 1, tzinfo=timezone.utc))]
    >>> stats = aggregate(roster, played)
    >>> (stats["a"].points, stats["a"].goal_difference, stats["b"].losses)
    (3, 2, 1)
    """
    tallies = new_tallies(players)
    for match in matches:
        apply_match(tallies, match)
    return {player_id: tally.freeze() for player_id, tally in tallies.items()}
