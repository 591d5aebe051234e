from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

import leaguetable.cli._common as common
import leaguetable.repositories.sqlite as sqlite_pkg
from leaguetable.domain.errors import NotFoundError


@pytest.fixture
def opened(monkeypatch: pytest.MonkeyPatch) -> list[sqlite3.Connection]:
    conns: list[sqlite3.Connection] = []
    real_connect = sqlite_pkg.connect

    def tracking_connect(db_path: str) -> sqlite3.Connection:
        conn = real_connect(db_path)
        conns.append(conn)
        return conn

    monkeypatch.setattr(sqlite_pkg, "connect", tracking_connect)
    monkeypatch.setattr(common, "get_logger", lambda: None)
    return conns


def test_connection_closed_after_use(tmp_path: Path, opened: list[sqlite3.Connection]) -> None:
    db = tmp_path / "league.sqlite3"
    with common.open_service(str(db)) as svc:
        svc.register_player("Ann")
        assert [p.name for p in svc.list_players()] == ["Ann"]

    assert len(opened) == 1
    with pytest.raises(sqlite3.ProgrammingError):
        opened[0].execute("SELECT 1")


def test_connection_closed_when_request_fails(
    tmp_path: Path, opened: list[sqlite3.Connection]
) -> None:
    with pytest.raises(NotFoundError):
        with common.open_service(str(tmp_path / "league.sqlite3")) as svc:
            svc.delete_player("nobody")

    with pytest.raises(sqlite3.ProgrammingError):
        opened[0].execute("SELECT 1")


def test_cli_main_closes_connection(
    tmp_path: Path, opened: list[sqlite3.Connection], capsys: pytest.CaptureFixture[str]
) -> None:
    from leaguetable.cli import players

    db = str(tmp_path / "league.sqlite3")
    assert players.main(["--db", db, "add", "Ann"]) == 0
    assert players.main(["--db", db, "delete", "nobody"]) == 2
    capsys.readouterr()

    assert len(opened) == 2
    for conn in opened:
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")
