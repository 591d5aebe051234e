"""Round-robin league tracker: players, teams, match results and derived standings."""
