from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest

from leaguetable.domain.entities import Match, Player
from leaguetable.standings import (
    aggregate,
    compute_position_trend,
    compute_standings,
    match_outcome,
    positions,
)
from leaguetable.standings.aggregator import apply_match, new_tallies

SEEDS = list(range(12))
START = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _league(seed: int, *, dangling: bool = True) -> tuple[list[Player], list[Match]]:
    rng = random.Random(seed)
    roster = [Player(id=f"p{i}", name=f"Player {i}") for i in range(rng.randint(2, 8))]
    ids = [p.id for p in roster] + (["ghost"] if dangling else [])
    matches: list[Match] = []
    for n in range(rng.randint(0, 40)):
        p1, p2 = rng.sample(ids, 2)
        matches.append(
            Match(
                id=f"m{n}",
                player1_id=p1,
                player2_id=p2,
                player1_score=rng.randint(0, 5),
                player2_score=rng.randint(0, 5),
                # coarse dates so that ties in match_date occur
                match_date=START + timedelta(days=rng.randint(0, 6)),
            )
        )
    return roster, matches


def _valid(roster: list[Player], matches: list[Match]) -> list[Match]:
    known = {p.id for p in roster}
    return [m for m in matches if m.player1_id in known and m.player2_id in known]


@pytest.mark.parametrize("seed", SEEDS)
def test_swapping_sides_gives_same_totals(seed: int) -> None:
    roster, matches = _league(seed)
    swapped = [
        m.model_copy(
            update={
                "player1_id": m.player2_id,
                "player2_id": m.player1_id,
                "player1_score": m.player2_score,
                "player2_score": m.player1_score,
            }
        )
        for m in matches
    ]
    assert aggregate(roster, matches) == aggregate(roster, swapped)


@pytest.mark.parametrize("seed", SEEDS)
def test_points_are_conserved(seed: int) -> None:
    roster, matches = _league(seed)
    valid = _valid(roster, matches)
    drawn = sum(1 for m in valid if match_outcome(m).value == "DRAW")
    decisive = len(valid) - drawn

    stats = aggregate(roster, matches)

    assert sum(s.points for s in stats.values()) == 3 * decisive + 2 * drawn
    assert sum(s.matches_played for s in stats.values()) == 2 * len(valid)
    assert sum(s.goals_for for s in stats.values()) == sum(s.goals_against for s in stats.values())


@pytest.mark.parametrize("seed", SEEDS)
def test_goal_difference_never_drifts(seed: int) -> None:
    roster, matches = _league(seed)
    tallies = new_tallies(roster)
    for m in matches:
        apply_match(tallies, m)
        assert all(t.goal_difference == t.goals_for - t.goals_against for t in tallies.values())


@pytest.mark.parametrize("seed", SEEDS)
def test_fold_order_does_not_matter(seed: int) -> None:
    roster, matches = _league(seed)
    shuffled = list(matches)
    random.Random(seed + 1000).shuffle(shuffled)
    assert aggregate(roster, matches) == aggregate(roster, shuffled)


@pytest.mark.parametrize("seed", SEEDS)
def test_standings_are_repeatable(seed: int) -> None:
    roster, matches = _league(seed)
    first = [s.model_dump_json() for s in compute_standings(roster, matches)]
    second = [s.model_dump_json() for s in compute_standings(roster, matches)]
    assert first == second


@pytest.mark.parametrize("seed", SEEDS)
def test_trend_ends_where_standings_are(seed: int) -> None:
    roster, matches = _league(seed)
    snaps = compute_position_trend(roster, matches)
    assert len(snaps) == len(_valid(roster, matches))
    if snaps:
        assert snaps[-1].positions == positions(compute_standings(roster, matches))
    for s in snaps:
        assert sorted(s.positions.values()) == list(range(1, len(roster) + 1))
    dates = [s.timestamp for s in snaps]
    assert dates == sorted(dates)
