# src/neighborfit/domain/neighborhood.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    lat: float
    lng: float


class Demographics(BaseModel):
    average_age: float
    median_income: float
    population_density: float
    family_friendly: float = Field(..., ge=0, le=10)


class Housing(BaseModel):
    median_rent: float
    median_home_price: float
    average_rent_1br: float
    average_rent_2br: float
    average_rent_3br: float


class NeighborhoodLifestyle(BaseModel):
    walk_score: float = Field(..., ge=0, le=100)
    transit_score: float = Field(..., ge=0, le=100)
    bike_score: float = Field(..., ge=0, le=100)
    crime_rate: float = Field(..., ge=0, le=10, description="0-10, lower is better")
    nightlife_score: float = Field(..., ge=0, le=10)
    outdoor_score: float = Field(..., ge=0, le=10)


class JobHub(BaseModel):
    name: str
    distance: float = Field(..., description="Miles")
    commute_time: float = Field(..., description="Minutes")


class NeighborhoodData(BaseModel):
    name: str
    city: str
    state: str
    zip_code: str
    coordinates: Coordinates
    demographics: Demographics
    housing: Housing
    lifestyle: NeighborhoodLifestyle
    amenities: list[str] = Field(default_factory=list)
    nearby_job_hubs: list[JobHub] = Field(default_factory=list)
    data_source: str = "manual_research"


class Neighborhood(NeighborhoodData):
    model_config = ConfigDict(frozen=True)

    id: str
    last_updated: datetime
