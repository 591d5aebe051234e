from __future__ import annotations

from datetime import datetime
from typing import Optional


def to_db(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


def from_db(value: object) -> Optional[datetime]:
    """Parse a stored ISO-8601 timestamp.

    Raises:
        ValueError: if the stored text is not an ISO-8601 timestamp.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise ValueError(f"unreadable timestamp in database: {value!r}") from exc
