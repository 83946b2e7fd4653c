# src/neighborfit/api/schemas.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from neighborfit.domain.neighborhood import JobHub, NeighborhoodData
from neighborfit.domain.preferences import (
    Budget,
    Lifestyle,
    LocationPreferences,
    UserPreferencesData,
)


# --------------------------------------------
# User preferences
# --------------------------------------------

class UserPreferencesCreate(UserPreferencesData):
    """Body for POST /api/user-preferences. id and timestamps are assigned server-side."""

    model_config = ConfigDict(extra="ignore")


class UserPreferencesUpdate(BaseModel):
    """
    Body for PUT /api/user-preferences/{id}.

    Every top-level section is optional; a section that is sent replaces
    the stored one as a whole.
    """
    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    age: int | None = Field(default=None, ge=18, le=100)
    budget: Budget | None = None
    lifestyle: Lifestyle | None = None
    preferences: LocationPreferences | None = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


# --------------------------------------------
# Neighborhoods
# --------------------------------------------

class NeighborhoodCreate(NeighborhoodData):
    """Catalog entries without a job hub cannot be commute-scored, so reject them here."""

    model_config = ConfigDict(extra="ignore")

    nearby_job_hubs: list[JobHub] = Field(..., min_length=1)


# --------------------------------------------
# Matches
# --------------------------------------------

class MatchRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user_id: str | None = None


class DeleteResponse(BaseModel):
    deleted: bool


class PriceRanges(BaseModel):
    under_2000: int
    under_3000: int
    under_4000: int
    over_4000: int


class AverageScores(BaseModel):
    walkability: float
    transit: float
    safety: float


class CatalogAnalytics(BaseModel):
    total: int
    by_state: dict[str, int]
    average_rent: float
    price_ranges: PriceRanges
    average_scores: AverageScores
