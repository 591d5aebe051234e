from __future__ import annotations

import sqlite3
from typing import Optional

from leaguetable.domain.entities import Team

from ..teams import TeamsRepo
from ._dates import from_db, to_db


class TeamsRepoSqlite(TeamsRepo):
    """SQLite implementation of :class:`TeamsRepo`."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS teams (
                team_id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                created_at TEXT NOT NULL
            )
            """
        )
        self._conn.commit()

    def get_by_id(self, team_id: str) -> Optional[Team]:
        cur = self._conn.execute(
            "SELECT team_id, name, created_at FROM teams WHERE team_id = ?",
            (team_id,),
        )
        row = cur.fetchone()
        if row:
            return _row_to_team(row)
        return None

    def list_all(self) -> list[Team]:
        cur = self._conn.execute("SELECT team_id, name, created_at FROM teams ORDER BY rowid")
        return [_row_to_team(row) for row in cur.fetchall()]

    def insert(self, team: Team) -> None:
        self._conn.execute(
            "INSERT INTO teams (team_id, name, created_at) VALUES (?, ?, ?)",
            (team.id, team.name, to_db(team.created_at)),
        )
        self._conn.commit()

    def update(self, team: Team) -> None:
        self._conn.execute(
            "UPDATE teams SET name = ? WHERE team_id = ?",
            (team.name, team.id),
        )
        self._conn.commit()

    def delete(self, team_id: str) -> None:
        self._conn.execute("DELETE FROM teams WHERE team_id = ?", (team_id,))
        self._conn.commit()


def _row_to_team(row: tuple) -> Team:
    # row: (team_id, name, created_at)
    return Team(id=row[0], name=row[1], created_at=from_db(row[2]))
