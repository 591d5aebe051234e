from __future__ import annotations

import sqlite3
from typing import Optional

from leaguetable.domain.entities import Match

from ..matches import MatchesRepo
from ._dates import from_db, to_db

_COLUMNS = (
    "match_id, player1_id, player2_id, player1_score, player2_score, "
    "match_date, created_at, updated_at"
)


class MatchesRepoSqlite(MatchesRepo):
    """SQLite implementation of :class:`MatchesRepo`.

    ``list_all`` returns rows in insertion order, which the position trend
    relies on to order matches played at the same instant.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS matches (
                match_id TEXT PRIMARY KEY,
                player1_id TEXT NOT NULL,
                player2_id TEXT NOT NULL,
                player1_score INTEGER NOT NULL CHECK(player1_score >= 0),
                player2_score INTEGER NOT NULL CHECK(player2_score >= 0),
                match_date TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT
            )
            """
        )
        self._conn.commit()

    def get_by_id(self, match_id: str) -> Optional[Match]:
        cur = self._conn.execute(
            f"SELECT {_COLUMNS} FROM matches WHERE match_id = ?",
            (match_id,),
        )
        row = cur.fetchone()
        if row:
            return _row_to_match(row)
        return None

    def list_all(self) -> list[Match]:
        cur = self._conn.execute(f"SELECT {_COLUMNS} FROM matches ORDER BY rowid")
        return [_row_to_match(r) for r in cur.fetchall()]

    def insert(self, match: Match) -> None:
        self._conn.execute(
            f"INSERT INTO matches ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (
                match.id,
                match.player1_id,
                match.player2_id,
                match.player1_score,
                match.player2_score,
                to_db(match.match_date),
                to_db(match.created_at),
                to_db(match.updated_at),
            ),
        )
        self._conn.commit()

    def update(self, match: Match) -> None:
        self._conn.execute(
            """
            UPDATE matches
            SET player1_id = ?, player2_id = ?, player1_score = ?, player2_score = ?,
                match_date = ?, updated_at = ?
            WHERE match_id = ?
            """,
            (
                match.player1_id,
                match.player2_id,
                match.player1_score,
                match.player2_score,
                to_db(match.match_date),
                to_db(match.updated_at),
                match.id,
            ),
        )
        self._conn.commit()

    def delete_for_player(self, player_id: str) -> int:
        cur = self._conn.execute(
            "DELETE FROM matches WHERE player1_id = ? OR player2_id = ?",
            (player_id, player_id),
        )
        self._conn.commit()
        return int(cur.rowcount)

    def delete_all(self) -> int:
        cur = self._conn.execute("DELETE FROM matches")
        self._conn.commit()
        return int(cur.rowcount)


def _row_to_match(r: tuple) -> Match:
    # r: (match_id, player1_id, player2_id, player1_score, player2_score,
    #     match_date, created_at, updated_at)
    return Match(
        id=r[0],
        player1_id=r[1],
        player2_id=r[2],
        player1_score=int(r[3]),
        player2_score=int(r[4]),
        match_date=from_db(r[5]),
        created_at=from_db(r[6]),
        updated_at=from_db(r[7]),
    )
