from __future__ import annotations

import sqlite3
from typing import Optional

from leaguetable.domain.entities import Player

from ..players import PlayersRepo
from ._dates import from_db, to_db


class PlayersRepoSqlite(PlayersRepo):
    """SQLite implementation of :class:`PlayersRepo`.

    ``team_id`` carries no foreign key: a team reference is weak and is
    cleared explicitly through :meth:`clear_team`.

    Example:
        >>> import sqlite3
        >>> repo = PlayersRepoSqlite(sqlite3.connect(":memory:"))
        >>> repo.insert(Player(id="p1", name="Ann"))
        >>> repo.get_by_id("p1").name
        'Ann'
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS players (
                player_id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                team_id TEXT,
                created_at TEXT NOT NULL
            )
            """
        )
        self._conn.commit()

    def get_by_id(self, player_id: str) -> Optional[Player]:
        cur = self._conn.execute(
            "SELECT player_id, name, team_id, created_at FROM players WHERE player_id = ?",
            (player_id,),
        )
        row = cur.fetchone()
        if row:
            return _row_to_player(row)
        return None

    def list_all(self) -> list[Player]:
        cur = self._conn.execute(
            "SELECT player_id, name, team_id, created_at FROM players ORDER BY rowid"
        )
        return [_row_to_player(row) for row in cur.fetchall()]

    def insert(self, player: Player) -> None:
        self._conn.execute(
            "INSERT INTO players (player_id, name, team_id, created_at) VALUES (?, ?, ?, ?)",
            (player.id, player.name, player.team_id, to_db(player.created_at)),
        )
        self._conn.commit()

    def update(self, player: Player) -> None:
        self._conn.execute(
            "UPDATE players SET name = ?, team_id = ? WHERE player_id = ?",
            (player.name, player.team_id, player.id),
        )
        self._conn.commit()

    def delete(self, player_id: str) -> None:
        self._conn.execute("DELETE FROM players WHERE player_id = ?", (player_id,))
        self._conn.commit()

    def clear_team(self, team_id: str) -> int:
        cur = self._conn.execute(
            "UPDATE players SET team_id = NULL WHERE team_id = ?",
            (team_id,),
        )
        self._conn.commit()
        return int(cur.rowcount)


def _row_to_player(row: tuple) -> Player:
    # row: (player_id, name, team_id, created_at)
    return Player(id=row[0], name=row[1], team_id=row[2], created_at=from_db(row[3]))
