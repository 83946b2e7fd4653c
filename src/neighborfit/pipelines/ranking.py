# neighborfit/pipelines/ranking.py

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd
from loguru import logger

from neighborfit.adapters.memory_repo import (
    InMemoryNeighborhoodRepository,
    InMemoryUserPreferencesRepository,
)
from neighborfit.adapters.seed import seed_neighborhoods
from neighborfit.domain.match import MatchData
from neighborfit.domain.neighborhood import Neighborhood, NeighborhoodData
from neighborfit.domain.preferences import UserPreferencesData
from neighborfit.services.matching import DEFAULT_LIMIT, rank_matches

MATCH_COLUMNS = [
    "rank",
    "neighborhood_id",
    "name",
    "city",
    "state",
    "median_rent",
    "score",
    "budget_match",
    "lifestyle_match",
    "commute_match",
    "amenity_match",
    "safety_match",
    "explanation",
]


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def load_catalog(path: Path | None) -> list[NeighborhoodData]:
    """
    Load neighborhoods from a JSON array, or the built-in seed catalog when
    no path is given.
    """
    if path is None:
        return seed_neighborhoods()

    raw = _read_json(path)
    if not isinstance(raw, list):
        raise ValueError(f"Catalog file must hold a JSON array, got {type(raw).__name__}")
    return [NeighborhoodData.model_validate(row) for row in raw]


def matches_to_frame(matches: list[MatchData], catalog: list[Neighborhood]) -> pd.DataFrame:
    by_id = {n.id: n for n in catalog}
    rows: list[dict[str, Any]] = []
    for i, m in enumerate(matches, start=1):
        n = by_id[m.neighborhood_id]
        rows.append(
            {
                "rank": i,
                "neighborhood_id": m.neighborhood_id,
                "name": n.name,
                "city": n.city,
                "state": n.state,
                "median_rent": n.housing.median_rent,
                "score": m.score,
                **m.factors.model_dump(),
                "explanation": m.explanation,
            }
        )
    return pd.DataFrame(rows, columns=MATCH_COLUMNS)


def rank_user_against_catalog(
    user_path: Path,
    catalog_path: Path | None = None,
    *,
    limit: int = DEFAULT_LIMIT,
    output_path: Path | None = None,
    skip_invalid: bool = True,
) -> pd.DataFrame:
    """
    Offline ranking run: one user profile against a catalog file.

    Writes the ranked table as CSV when output_path is given and returns it
    either way.
    """
    logger.info(
        "Starting ranking run",
        user_path=str(user_path),
        catalog_path=str(catalog_path) if catalog_path else "seed",
        limit=limit,
    )

    user_data = UserPreferencesData.model_validate(_read_json(user_path))
    user = InMemoryUserPreferencesRepository().create(user_data)

    repo = InMemoryNeighborhoodRepository(load_catalog(catalog_path))
    catalog = repo.list_all()

    ranked = rank_matches(user, catalog, limit=limit, skip_invalid=skip_invalid)
    df = matches_to_frame(ranked, catalog)

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)
        logger.info("Wrote ranked matches", output_path=str(output_path), rows=len(df))

    logger.info("Ranking run completed", catalog_size=len(catalog), returned=len(df))
    return df
