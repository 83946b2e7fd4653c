# src/neighborfit/analysis/catalog.py

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd

from neighborfit.domain.neighborhood import Neighborhood

# "under" buckets are cumulative: a 1,500 rent counts toward all three.
_RENT_CUTOFFS = (2000, 3000, 4000)


def catalog_frame(neighborhoods: Iterable[Neighborhood]) -> pd.DataFrame:
    """One row per neighborhood with the columns the summaries need."""
    rows = [
        {
            "id": n.id,
            "name": n.name,
            "city": n.city,
            "state": n.state,
            "median_rent": float(n.housing.median_rent),
            "walk_score": float(n.lifestyle.walk_score),
            "transit_score": float(n.lifestyle.transit_score),
            "crime_rate": float(n.lifestyle.crime_rate),
        }
        for n in neighborhoods
    ]
    return pd.DataFrame(
        rows,
        columns=["id", "name", "city", "state", "median_rent", "walk_score", "transit_score", "crime_rate"],
    )


def summarize_catalog(neighborhoods: Iterable[Neighborhood]) -> dict[str, Any]:
    """
    Catalog-wide counts and averages for the analytics page.

    safety is reported as mean(10 - crime_rate) so higher reads as better.
    """
    df = catalog_frame(neighborhoods)
    rent = df["median_rent"]

    price_ranges = {f"under_{c}": int((rent < c).sum()) for c in _RENT_CUTOFFS}
    price_ranges[f"over_{_RENT_CUTOFFS[-1]}"] = int((rent >= _RENT_CUTOFFS[-1]).sum())

    if df.empty:
        return {
            "total": 0,
            "by_state": {},
            "average_rent": 0.0,
            "price_ranges": price_ranges,
            "average_scores": {"walkability": 0.0, "transit": 0.0, "safety": 0.0},
        }

    by_state = df.groupby("state", sort=False).size()

    return {
        "total": int(len(df)),
        "by_state": {str(k): int(v) for k, v in by_state.items()},
        "average_rent": float(rent.mean()),
        "price_ranges": price_ranges,
        "average_scores": {
            "walkability": float(df["walk_score"].mean()),
            "transit": float(df["transit_score"].mean()),
            "safety": float((10.0 - df["crime_rate"]).mean()),
        },
    }
