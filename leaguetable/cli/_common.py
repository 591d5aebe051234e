from __future__ import annotations

import argparse
import json
import sys
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterable, Iterator

from pydantic import BaseModel

from leaguetable.application.services.league_service import LeagueService
from leaguetable.config.settings import settings
from leaguetable.domain.errors import InvalidInputError, NotFoundError
from leaguetable.logging_config import get_logger

# Errors that mean "the request was rejected", reported on stderr with exit code 2
REQUEST_ERRORS = (InvalidInputError, NotFoundError)
EXIT_REJECTED = 2


def add_db_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--db",
        default=None,
        metavar="PATH",
        help=f"SQLite database file (default: {settings.db_path})",
    )


@contextmanager
def open_service(db: str | None) -> Iterator[LeagueService]:
    """Yield a service over the SQLite store at ``db``; the connection is closed on exit."""
    from leaguetable.repositories.sqlite import (
        MatchesRepoSqlite,
        PlayersRepoSqlite,
        TeamsRepoSqlite,
        connect,
    )

    get_logger()
    conn = connect(db or settings.db_path)
    try:
        yield LeagueService(PlayersRepoSqlite(conn), TeamsRepoSqlite(conn), MatchesRepoSqlite(conn))
    finally:
        conn.close()


def parse_date(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 date: {value!r}") from exc


def dump_json(items: Iterable[BaseModel]) -> str:
    payload: list[Any] = [item.model_dump(mode="json") for item in items]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def report_rejected(exc: Exception) -> int:
    print(f"error: {exc}", file=sys.stderr)
    return EXIT_REJECTED
