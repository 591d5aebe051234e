"""Standings engine: aggregation, ranking and chronological replay.

Every function here is pure. Callers pass a consistent snapshot of the roster
and the match log; nothing is read from or written to the entity store.
"""

from .aggregator import (
    POINTS_FOR_DRAW,
    POINTS_FOR_LOSS,
    POINTS_FOR_WIN,
    aggregate,
    apply_match,
    match_outcome,
)
from .ranking import compute_standings, positions, rank, ranking_key
from .trend import chronological, compute_position_trend, iter_position_trend

__all__ = [
    "POINTS_FOR_DRAW",
    "POINTS_FOR_LOSS",
    "POINTS_FOR_WIN",
    "aggregate",
    "apply_match",
    "chronological",
    "compute_position_trend",
    "compute_standings",
    "iter_position_trend",
    "match_outcome",
    "positions",
    "rank",
    "ranking_key",
]
