from enum import Enum


class MatchOutcome(str, Enum):
    PLAYER1 = "PLAYER1"
    DRAW = "DRAW"
    PLAYER2 = "PLAYER2"


class SideResult(str, Enum):
    """A match result from one player's point of view."""

    WIN = "W"
    DRAW = "D"
    LOSS = "L"
