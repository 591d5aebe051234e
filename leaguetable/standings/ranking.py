"""League-table ordering.

:func:`ranking_key` is the only comparator in the project. Both the standings
query and the position trend sort through :func:`rank`.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, TypeVar

from leaguetable.domain.entities import Match, Player, PlayerStatistics
from leaguetable.domain.value_objects.ids import PlayerId

from .aggregator import aggregate


class Rankable(Protocol):
    @property
    def player_id(self) -> PlayerId: ...

    @property
    def points(self) -> int: ...

    @property
    def goal_difference(self) -> int: ...

    @property
    def goals_for(self) -> int: ...


R = TypeVar("R", bound=Rankable)


def ranking_key(stats: Rankable) -> tuple[int, int, int]:
    """Points, then goal difference, then goals scored; higher is better."""
    return (-stats.points, -stats.goal_difference, -stats.goals_for)


def rank(stats: Iterable[R]) -> list[R]:
    """Return ``stats`` best first.

    ``sorted`` is stable, so fully tied rows keep their input order and the
    result is identical across calls with identical input.
    """
    return sorted(stats, key=ranking_key)


def positions(ranked: Sequence[Rankable]) -> dict[PlayerId, int]:
    """Map each player of an already ranked sequence to its 1-based position."""
    return {row.player_id: pos for pos, row in enumerate(ranked, start=1)}


def compute_standings(players: Iterable[Player], matches: Iterable[Match]) -> list[PlayerStatistics]:
    """Aggregate ``matches`` over ``players`` and return the ranked table."""
    return rank(aggregate(players, matches).values())
