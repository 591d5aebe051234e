from __future__ import annotations

from leaguetable.domain.entities import Player, PlayerStatistics
from leaguetable.standings import trend
from leaguetable.standings.ranking import compute_standings, positions, rank, ranking_key


def _row(pid: str, *, w: int = 0, d: int = 0, l: int = 0, gf: int = 0, ga: int = 0) -> PlayerStatistics:
    return PlayerStatistics(
        player_id=pid,
        player_name=pid.upper(),
        matches_played=w + d + l,
        wins=w,
        draws=d,
        losses=l,
        goals_for=gf,
        goals_against=ga,
        goal_difference=gf - ga,
        points=3 * w + d,
    )


def test_points_decide_first() -> None:
    rows = [_row("a", d=1, gf=9, ga=0), _row("b", w=1, gf=1, ga=0)]
    assert [r.player_id for r in rank(rows)] == ["b", "a"]


def test_goal_difference_breaks_points_tie() -> None:
    rows = [_row("a", w=1, gf=5, ga=4), _row("b", w=1, gf=2, ga=0)]
    assert [r.player_id for r in rank(rows)] == ["b", "a"]


def test_goals_for_breaks_goal_difference_tie() -> None:
    rows = [_row("a", w=1, gf=2, ga=1), _row("b", w=1, gf=4, ga=3)]
    assert [r.player_id for r in rank(rows)] == ["b", "a"]


def test_full_tie_keeps_input_order() -> None:
    rows = [_row("x", d=1, gf=2, ga=2), _row("y", d=1, gf=2, ga=2), _row("z", d=1, gf=2, ga=2)]
    assert [r.player_id for r in rank(rows)] == ["x", "y", "z"]
    assert [r.player_id for r in rank(reversed(rows))] == ["z", "y", "x"]


def test_ranking_key_orders_best_first() -> None:
    assert ranking_key(_row("a", w=1, gf=3, ga=1)) < ranking_key(_row("b", d=1, gf=3, ga=3))


def test_positions_are_one_based() -> None:
    ranked = rank([_row("a"), _row("b", w=1, gf=1)])
    assert positions(ranked) == {"b": 1, "a": 2}


def test_draw_scenario_keeps_roster_order(make_match) -> None:
    roster = [Player(id="p1", name="Ann"), Player(id="p2", name="Bob")]
    table = compute_standings(roster, [make_match("p1", 2, 2, "p2")])
    assert [s.player_id for s in table] == ["p1", "p2"]
    assert all(s.points == 1 for s in table)


def test_standings_are_deterministic(players: list[Player], make_match) -> None:
    matches = [make_match("p1", 1, 1, "p2"), make_match("p3", 0, 0, "p1"), make_match("p2", 0, 0, "p3")]
    first = compute_standings(players, matches)
    for _ in range(5):
        again = compute_standings(players, matches)
        assert [s.model_dump_json() for s in again] == [s.model_dump_json() for s in first]


def test_trend_uses_the_same_comparator() -> None:
    assert trend.rank is rank
    assert trend.positions is positions


def test_empty_roster_gives_empty_table() -> None:
    assert compute_standings([], []) == []
