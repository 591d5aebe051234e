from typing import NewType

PlayerId = NewType("PlayerId", str)
TeamId = NewType("TeamId", str)
MatchId = NewType("MatchId", str)
