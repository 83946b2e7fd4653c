# src/neighborfit/domain/preferences.py
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Closed sets collected by the preferences form
Level = Literal["low", "moderate", "high"]
TransportNeed = Literal["unnecessary", "preferred", "required"]
NeighborhoodType = Literal["urban", "suburban", "rural"]


class Budget(BaseModel):
    min: float = Field(..., ge=0, description="Lowest monthly rent the user considers")
    max: float = Field(..., ge=0, description="Highest monthly rent the user accepts")


class Lifestyle(BaseModel):
    work_from_home: bool
    has_children: bool
    has_pets: bool
    night_life: Level
    outdoor_activities: Level
    public_transport: TransportNeed
    walkability: Level
    safety_priority: Level


class LocationPreferences(BaseModel):
    max_commute: float = Field(..., ge=0, description="Minutes, one way")
    neighborhood_types: list[NeighborhoodType] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    deal_breakers: list[str] = Field(default_factory=list)


class UserPreferencesData(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    age: int = Field(..., ge=18, le=100)
    budget: Budget
    lifestyle: Lifestyle
    preferences: LocationPreferences


class UserPreferences(UserPreferencesData):
    # The matcher only ever reads a profile.
    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime
    updated_at: datetime
