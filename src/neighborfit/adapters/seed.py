# src/neighborfit/adapters/seed.py
from __future__ import annotations

from typing import Any

from neighborfit.domain.neighborhood import NeighborhoodData

# Hand-collected reference neighborhoods loaded at startup when
# config.SEED_CATALOG is on.
_SEED_ROWS: list[dict[str, Any]] = [
    {
        "name": "Capitol Hill",
        "city": "Seattle",
        "state": "WA",
        "zip_code": "98102",
        "coordinates": {"lat": 47.6205, "lng": -122.3212},
        "demographics": {
            "average_age": 32,
            "median_income": 85000,
            "population_density": 12000,
            "family_friendly": 6,
        },
        "housing": {
            "median_rent": 2200,
            "median_home_price": 750000,
            "average_rent_1br": 1800,
            "average_rent_2br": 2400,
            "average_rent_3br": 3200,
        },
        "lifestyle": {
            "walk_score": 90,
            "transit_score": 85,
            "bike_score": 75,
            "crime_rate": 4,
            "nightlife_score": 9,
            "outdoor_score": 7,
        },
        "amenities": ["restaurants", "bars", "coffee_shops", "parks", "grocery_stores", "gyms"],
        "nearby_job_hubs": [
            {"name": "Downtown Seattle", "distance": 2.5, "commute_time": 15},
            {"name": "Amazon HQ", "distance": 1.8, "commute_time": 12},
            {"name": "Microsoft Campus", "distance": 12, "commute_time": 35},
        ],
    },
    {
        "name": "Fremont",
        "city": "Seattle",
        "state": "WA",
        "zip_code": "98103",
        "coordinates": {"lat": 47.6511, "lng": -122.3501},
        "demographics": {
            "average_age": 35,
            "median_income": 78000,
            "population_density": 8500,
            "family_friendly": 8,
        },
        "housing": {
            "median_rent": 1900,
            "median_home_price": 680000,
            "average_rent_1br": 1600,
            "average_rent_2br": 2100,
            "average_rent_3br": 2800,
        },
        "lifestyle": {
            "walk_score": 75,
            "transit_score": 65,
            "bike_score": 80,
            "crime_rate": 2,
            "nightlife_score": 6,
            "outdoor_score": 8,
        },
        "amenities": ["farmers_market", "parks", "coffee_shops", "bicycle_shops", "restaurants", "dog_parks"],
        "nearby_job_hubs": [
            {"name": "Downtown Seattle", "distance": 4.2, "commute_time": 25},
            {"name": "University District", "distance": 3.1, "commute_time": 20},
            {"name": "Ballard", "distance": 2.8, "commute_time": 18},
        ],
    },
    {
        "name": "Williamsburg",
        "city": "Brooklyn",
        "state": "NY",
        "zip_code": "11211",
        "coordinates": {"lat": 40.7081, "lng": -73.9571},
        "demographics": {
            "average_age": 29,
            "median_income": 95000,
            "population_density": 15000,
            "family_friendly": 5,
        },
        "housing": {
            "median_rent": 3200,
            "median_home_price": 950000,
            "average_rent_1br": 2800,
            "average_rent_2br": 3800,
            "average_rent_3br": 5200,
        },
        "lifestyle": {
            "walk_score": 88,
            "transit_score": 90,
            "bike_score": 70,
            "crime_rate": 5,
            "nightlife_score": 10,
            "outdoor_score": 6,
        },
        "amenities": ["restaurants", "bars", "art_galleries", "music_venues", "coffee_shops", "boutiques"],
        "nearby_job_hubs": [
            {"name": "Manhattan Financial District", "distance": 3.2, "commute_time": 20},
            {"name": "Midtown Manhattan", "distance": 5.1, "commute_time": 30},
            {"name": "Brooklyn Tech Hub", "distance": 2.0, "commute_time": 15},
        ],
    },
    {
        "name": "Plano",
        "city": "Plano",
        "state": "TX",
        "zip_code": "75023",
        "coordinates": {"lat": 33.0198, "lng": -96.6989},
        "demographics": {
            "average_age": 42,
            "median_income": 102000,
            "population_density": 4200,
            "family_friendly": 9,
        },
        "housing": {
            "median_rent": 1600,
            "median_home_price": 485000,
            "average_rent_1br": 1300,
            "average_rent_2br": 1700,
            "average_rent_3br": 2200,
        },
        "lifestyle": {
            "walk_score": 45,
            "transit_score": 35,
            "bike_score": 40,
            "crime_rate": 1,
            "nightlife_score": 4,
            "outdoor_score": 7,
        },
        "amenities": ["shopping_malls", "parks", "schools", "golf_courses", "restaurants", "libraries"],
        "nearby_job_hubs": [
            {"name": "Legacy West", "distance": 3.2, "commute_time": 15},
            {"name": "Downtown Dallas", "distance": 18, "commute_time": 40},
            {"name": "Frisco Business District", "distance": 8, "commute_time": 20},
        ],
    },
    {
        "name": "Mission District",
        "city": "San Francisco",
        "state": "CA",
        "zip_code": "94110",
        "coordinates": {"lat": 37.7599, "lng": -122.4148},
        "demographics": {
            "average_age": 31,
            "median_income": 88000,
            "population_density": 13500,
            "family_friendly": 6,
        },
        "housing": {
            "median_rent": 3800,
            "median_home_price": 1200000,
            "average_rent_1br": 3200,
            "average_rent_2br": 4500,
            "average_rent_3br": 6200,
        },
        "lifestyle": {
            "walk_score": 95,
            "transit_score": 85,
            "bike_score": 80,
            "crime_rate": 6,
            "nightlife_score": 9,
            "outdoor_score": 8,
        },
        "amenities": ["restaurants", "bars", "street_art", "parks", "coffee_shops", "food_trucks"],
        "nearby_job_hubs": [
            {"name": "SOMA Tech District", "distance": 2.8, "commute_time": 20},
            {"name": "Financial District", "distance": 3.5, "commute_time": 25},
            {"name": "Silicon Valley", "distance": 35, "commute_time": 60},
        ],
    },
]


def seed_neighborhoods() -> list[NeighborhoodData]:
    return [NeighborhoodData.model_validate(row) for row in _SEED_ROWS]
