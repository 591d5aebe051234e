"""Error types shared by the standings engine and the service layer."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when input violates a precondition the engine relies on.

    Examples are a match whose two sides are the same player, a roster with a
    repeated identity, or a request naming the same player twice.
    """


class NotFoundError(LookupError):
    """Raised by the service layer when a referenced entity does not exist."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id
