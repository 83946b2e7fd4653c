# src/neighborfit/domain/errors.py
from __future__ import annotations


class InvalidNeighborhoodData(ValueError):
    """A catalog entry is missing data the matcher cannot score without."""

    def __init__(self, neighborhood_id: str, reason: str) -> None:
        self.neighborhood_id = neighborhood_id
        self.reason = reason
        super().__init__(f"neighborhood {neighborhood_id}: {reason}")


class NotFoundError(LookupError):
    def __init__(self, kind: str, item_id: str) -> None:
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} not found: {item_id}")
