# src/neighborfit/domain/ports.py
from __future__ import annotations

from typing import Any, Protocol

from neighborfit.domain.match import Match, MatchData
from neighborfit.domain.neighborhood import Neighborhood, NeighborhoodData
from neighborfit.domain.preferences import UserPreferences, UserPreferencesData


# ----------------------------
# User preferences
# ----------------------------

class UserPreferencesRepository(Protocol):
    def create(self, data: UserPreferencesData) -> UserPreferences:
        ...

    def get(self, user_id: str) -> UserPreferences | None:
        ...

    def update(self, user_id: str, changes: dict[str, Any]) -> UserPreferences | None:
        ...

    def delete(self, user_id: str) -> bool:
        ...


# ----------------------------
# Neighborhood catalog
# ----------------------------

class NeighborhoodRepository(Protocol):
    def create(self, data: NeighborhoodData) -> Neighborhood:
        ...

    def get(self, neighborhood_id: str) -> Neighborhood | None:
        ...

    def list_all(self) -> list[Neighborhood]:
        ...

    def search(
        self,
        *,
        city: str | None = None,
        state: str | None = None,
        max_rent: float | None = None,
    ) -> list[Neighborhood]:
        ...

    def find_by_budget(self, min_budget: float, max_budget: float) -> list[Neighborhood]:
        ...

    def find_by_lifestyle(
        self,
        *,
        min_walk_score: float | None = None,
        min_transit_score: float | None = None,
        max_crime_rate: float | None = None,
        min_nightlife_score: float | None = None,
        min_outdoor_score: float | None = None,
    ) -> list[Neighborhood]:
        ...


# ----------------------------
# Matches
# ----------------------------

class MatchRepository(Protocol):
    def create(self, data: MatchData) -> Match:
        ...

    def list_for_user(self, user_id: str) -> list[Match]:
        ...

    def get(self, match_id: str) -> Match | None:
        ...
