from __future__ import annotations

import sqlite3
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterator

import pytest

from leaguetable.domain.entities import Match, Player

BASE_DATE = datetime(2024, 5, 1, 18, 0, tzinfo=timezone.utc)

MatchFactory = Callable[..., Match]


@pytest.fixture
def players() -> list[Player]:
    return [Player(id="p1", name="Ann"), Player(id="p2", name="Bob"), Player(id="p3", name="Cid")]


@pytest.fixture
def make_match() -> MatchFactory:
    counter = {"n": 0}

    def _make(
        p1: str,
        s1: int,
        s2: int,
        p2: str,
        *,
        day: int | None = None,
        match_id: str | None = None,
    ) -> Match:
        counter["n"] += 1
        n = counter["n"]
        offset = n if day is None else day
        return Match(
            id=match_id or f"m{n}",
            player1_id=p1,
            player2_id=p2,
            player1_score=s1,
            player2_score=s2,
            match_date=BASE_DATE + timedelta(days=offset),
        )

    return _make


@pytest.fixture
def conn() -> Iterator[sqlite3.Connection]:
    c = sqlite3.connect(":memory:")
    yield c
    c.close()
