# src/neighborfit/domain/match.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MatchFactors(BaseModel):
    model_config = ConfigDict(frozen=True)

    budget_match: float = Field(..., ge=0, le=100)
    lifestyle_match: float = Field(..., ge=0, le=100)
    commute_match: float = Field(..., ge=0, le=100)
    amenity_match: float = Field(..., ge=0, le=100)
    safety_match: float = Field(..., ge=0, le=100)


class MatchData(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str
    neighborhood_id: str
    score: int = Field(..., ge=0, le=100)
    factors: MatchFactors
    explanation: str


class Match(MatchData):
    id: str
    created_at: datetime
