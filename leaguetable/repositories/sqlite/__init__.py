"""SQLite adapters for the league repositories."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from .matches_sqlite import MatchesRepoSqlite
from .players_sqlite import PlayersRepoSqlite
from .teams_sqlite import TeamsRepoSqlite


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open ``db_path`` (creating parent folders) and make sure every table exists."""
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    ensure_schema(conn)
    return conn


def ensure_schema(conn: sqlite3.Connection) -> None:
    # Programmatic schema init via repos so it always matches code
    TeamsRepoSqlite(conn)
    PlayersRepoSqlite(conn)
    MatchesRepoSqlite(conn)


__all__ = [
    "MatchesRepoSqlite",
    "PlayersRepoSqlite",
    "TeamsRepoSqlite",
    "connect",
    "ensure_schema",
]
