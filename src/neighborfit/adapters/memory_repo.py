from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Iterable

from neighborfit.domain.match import Match, MatchData
from neighborfit.domain.neighborhood import Neighborhood, NeighborhoodData
from neighborfit.domain.ports import (
    MatchRepository,
    NeighborhoodRepository,
    UserPreferencesRepository,
)
from neighborfit.domain.preferences import UserPreferences, UserPreferencesData


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class InMemoryUserPreferencesRepository(UserPreferencesRepository):
    def __init__(self) -> None:
        self._items: dict[str, UserPreferences] = {}

    def create(self, data: UserPreferencesData) -> UserPreferences:
        now = _now()
        rec = UserPreferences(**data.model_dump(), id=_new_id(), created_at=now, updated_at=now)
        self._items[rec.id] = rec
        return rec

    def get(self, user_id: str) -> UserPreferences | None:
        return self._items.get(user_id)

    def update(self, user_id: str, changes: dict[str, Any]) -> UserPreferences | None:
        existing = self._items.get(user_id)
        if existing is None:
            return None

        # shallow merge: a nested section is replaced as a whole
        merged = existing.model_dump()
        merged.update({k: v for k, v in changes.items() if k not in ("id", "created_at")})
        merged["updated_at"] = _now()

        updated = UserPreferences.model_validate(merged)
        self._items[user_id] = updated
        return updated

    def delete(self, user_id: str) -> bool:
        return self._items.pop(user_id, None) is not None


class InMemoryNeighborhoodRepository(NeighborhoodRepository):
    def __init__(self, seed: Iterable[NeighborhoodData] | None = None) -> None:
        # dicts keep insertion order, which is the catalog order the ranker sees
        self._items: dict[str, Neighborhood] = {}
        for data in seed or ():
            self.create(data)

    def create(self, data: NeighborhoodData) -> Neighborhood:
        rec = Neighborhood(**data.model_dump(), id=_new_id(), last_updated=_now())
        self._items[rec.id] = rec
        return rec

    def get(self, neighborhood_id: str) -> Neighborhood | None:
        return self._items.get(neighborhood_id)

    def list_all(self) -> list[Neighborhood]:
        return list(self._items.values())

    def search(
        self,
        *,
        city: str | None = None,
        state: str | None = None,
        max_rent: float | None = None,
    ) -> list[Neighborhood]:
        out: list[Neighborhood] = []
        for n in self._items.values():
            if city and n.city.lower() != city.lower():
                continue
            if state and n.state.lower() != state.lower():
                continue
            if max_rent is not None and n.housing.median_rent > max_rent:
                continue
            out.append(n)
        return out

    def find_by_budget(self, min_budget: float, max_budget: float) -> list[Neighborhood]:
        return [
            n for n in self._items.values()
            if min_budget <= n.housing.median_rent <= max_budget
        ]

    def find_by_lifestyle(
        self,
        *,
        min_walk_score: float | None = None,
        min_transit_score: float | None = None,
        max_crime_rate: float | None = None,
        min_nightlife_score: float | None = None,
        min_outdoor_score: float | None = None,
    ) -> list[Neighborhood]:
        out: list[Neighborhood] = []
        for n in self._items.values():
            ls = n.lifestyle
            if min_walk_score is not None and ls.walk_score < min_walk_score:
                continue
            if min_transit_score is not None and ls.transit_score < min_transit_score:
                continue
            if max_crime_rate is not None and ls.crime_rate > max_crime_rate:
                continue
            if min_nightlife_score is not None and ls.nightlife_score < min_nightlife_score:
                continue
            if min_outdoor_score is not None and ls.outdoor_score < min_outdoor_score:
                continue
            out.append(n)
        return out


class InMemoryMatchRepository(MatchRepository):
    def __init__(self) -> None:
        self._items: dict[str, Match] = {}

    def create(self, data: MatchData) -> Match:
        rec = Match(**data.model_dump(), id=_new_id(), created_at=_now())
        self._items[rec.id] = rec
        return rec

    def list_for_user(self, user_id: str) -> list[Match]:
        return [m for m in self._items.values() if m.user_id == user_id]

    def get(self, match_id: str) -> Match | None:
        return self._items.get(match_id)
