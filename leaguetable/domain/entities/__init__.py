from .match import Match
from .player import Player
from .snapshot import PositionSnapshot
from .statistics import PlayerStatistics
from .team import Team

__all__ = [
    "Match",
    "Player",
    "PlayerStatistics",
    "PositionSnapshot",
    "Team",
]
