"""Position-over-time replay of the match log.

Matches are replayed in chronological order through the same fold step as
:mod:`.aggregator`; after each one the whole roster is re-ranked through
:func:`.ranking.rank`. Nothing is cached between calls: every request
recomputes the sequence from scratch.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from leaguetable.domain.entities import Match, Player, PositionSnapshot

from .aggregator import apply_match, new_tallies
from .ranking import positions, rank


def chronological(matches: Iterable[Match]) -> list[Match]:
    """Sort ascending by ``match_date``; equal dates keep their input order."""
    return sorted(matches, key=lambda m: m.match_date)


def iter_position_trend(
    players: Iterable[Player], matches: Iterable[Match]
) -> Iterator[PositionSnapshot]:
    """Yield one :class:`PositionSnapshot` per applied match.

    ``match_index`` is the 1-based position of the match in the chronological
    log. Dangling matches (a side missing from ``players``) change no tally and
    produce no snapshot, but still take their index, so the sequence can have
    gaps. Players with no match yet share zero statistics and tie with each
    other, keeping roster order among themselves.
    """
    tallies = new_tallies(players)
    for index, match in enumerate(chronological(matches), start=1):
        if not apply_match(tallies, match):
            continue
        yield PositionSnapshot(
            match_index=index,
            match_id=match.id,
            timestamp=match.match_date.isoformat(),
            positions=positions(rank(tallies.values())),
        )


def compute_position_trend(
    players: Iterable[Player], matches: Iterable[Match]
) -> list[PositionSnapshot]:
    return list(iter_position_trend(players, matches))
