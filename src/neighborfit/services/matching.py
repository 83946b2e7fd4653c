from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable

from neighborfit.adapters.logging_utils import get_logger
from neighborfit.analysis.scoring import (
    amenity_score,
    budget_score,
    commute_score,
    lifestyle_score,
    safety_score,
)
from neighborfit.domain.errors import InvalidNeighborhoodData, NotFoundError
from neighborfit.domain.match import Match, MatchData, MatchFactors
from neighborfit.domain.neighborhood import Neighborhood
from neighborfit.domain.ports import (
    MatchRepository,
    NeighborhoodRepository,
    UserPreferencesRepository,
)
from neighborfit.domain.preferences import UserPreferences

logger = get_logger(__name__)

DEFAULT_LIMIT = 10

# ---------------------------------------------------------------------
# Factor weights. Budget dominates, safety is a baseline.
# ---------------------------------------------------------------------
FACTOR_WEIGHTS: dict[str, float] = {
    "budget_match": 0.30,
    "lifestyle_match": 0.25,
    "commute_match": 0.20,
    "amenity_match": 0.15,
    "safety_match": 0.10,
}

_FACTOR_FUNCS: dict[str, Callable[[UserPreferences, Neighborhood], float]] = {
    "budget_match": budget_score,
    "lifestyle_match": lifestyle_score,
    "commute_match": commute_score,
    "amenity_match": amenity_score,
    "safety_match": safety_score,
}


def _check_weights(weights: dict[str, float]) -> None:
    if set(weights) != set(_FACTOR_FUNCS):
        raise ValueError(f"weights must cover exactly {sorted(_FACTOR_FUNCS)}")
    total = sum(weights.values())
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        raise ValueError(f"factor weights must sum to 1.0, got {total}")


_check_weights(FACTOR_WEIGHTS)


# =====================================================================
# Explanation rules
# =====================================================================


@dataclass(frozen=True)
class ExplanationRule:
    """One remark; within a `group` only the first passing rule is used."""

    group: str
    applies: Callable[[MatchFactors, Neighborhood], bool]
    template: str


def _money(value: float) -> str:
    v = float(value)
    if v.is_integer():
        return f"{int(v):,}"
    return f"{v:,.3f}".rstrip("0").rstrip(".")


EXPLANATION_RULES: list[ExplanationRule] = [
    ExplanationRule("budget", lambda f, n: f.budget_match > 80,
                    "Great budget fit with median rent of ${rent}"),
    ExplanationRule("budget", lambda f, n: f.budget_match > 60,
                    "Decent budget match with median rent of ${rent}"),
    ExplanationRule("budget", lambda f, n: True,
                    "Budget stretch with median rent of ${rent}"),
    ExplanationRule("lifestyle", lambda f, n: f.lifestyle_match > 80, "Excellent lifestyle match"),
    ExplanationRule("lifestyle", lambda f, n: f.lifestyle_match > 60, "Good lifestyle compatibility"),
    ExplanationRule("commute", lambda f, n: f.commute_match > 80, "Convenient commute options"),
    ExplanationRule("commute", lambda f, n: f.commute_match < 50, "Longer commute times"),
    ExplanationRule("safety", lambda f, n: f.safety_match > 80, "Low crime area"),
    # raw walk score, not the mapped preference score
    ExplanationRule("walkability", lambda f, n: n.lifestyle.walk_score > 80, "Very walkable neighborhood"),
]


def explain_match(factors: MatchFactors, neighborhood: Neighborhood) -> str:
    remarks: list[str] = []
    used: set[str] = set()
    for rule in EXPLANATION_RULES:
        if rule.group in used or not rule.applies(factors, neighborhood):
            continue
        used.add(rule.group)
        remarks.append(rule.template.format(rent=_money(neighborhood.housing.median_rent)))
    return ". ".join(remarks) + "."


# =====================================================================
# Scoring & ranking
# =====================================================================


def compute_factors(user: UserPreferences, neighborhood: Neighborhood) -> MatchFactors:
    return MatchFactors(**{name: fn(user, neighborhood) for name, fn in _FACTOR_FUNCS.items()})


def aggregate_score(factors: MatchFactors) -> float:
    """Weighted sum of the five factors, unrounded, in [0, 100]."""
    total = sum(getattr(factors, name) * w for name, w in FACTOR_WEIGHTS.items())
    return max(0.0, min(100.0, total))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def score_neighborhood(user: UserPreferences, neighborhood: Neighborhood) -> MatchData:
    factors = compute_factors(user, neighborhood)
    return MatchData(
        user_id=user.id,
        neighborhood_id=neighborhood.id,
        score=_round_half_up(aggregate_score(factors)),
        factors=factors,
        explanation=explain_match(factors, neighborhood),
    )


def rank_matches(
    user: UserPreferences,
    neighborhoods: Iterable[Neighborhood],
    *,
    limit: int = DEFAULT_LIMIT,
    skip_invalid: bool = True,
) -> list[MatchData]:
    """
    Score every neighborhood for `user` and return the best `limit`.

    Sorted by rounded score, highest first. Equal scores keep catalog order.

    A neighborhood that cannot be scored (InvalidNeighborhoodData) is logged
    and left out when skip_invalid is true, otherwise the error propagates.
    """
    scored: list[MatchData] = []
    for n in neighborhoods:
        try:
            scored.append(score_neighborhood(user, n))
        except InvalidNeighborhoodData as e:
            if not skip_invalid:
                raise
            logger.warning(
                "neighborhood_skipped",
                extra={"context": {"neighborhood_id": e.neighborhood_id, "reason": e.reason}},
            )

    scored.sort(key=lambda m: m.score, reverse=True)
    return scored[: max(0, limit)]


def generate_matches(
    user_id: str,
    *,
    users: UserPreferencesRepository,
    neighborhoods: NeighborhoodRepository,
    matches: MatchRepository,
    limit: int = DEFAULT_LIMIT,
    skip_invalid: bool = True,
) -> list[Match]:
    """Rank the whole catalog for a stored user and persist the results."""
    user = users.get(user_id)
    if user is None:
        raise NotFoundError("user preferences", user_id)

    catalog = neighborhoods.list_all()
    ranked = rank_matches(user, catalog, limit=limit, skip_invalid=skip_invalid)
    saved = [matches.create(m) for m in ranked]

    logger.info(
        "matches_generated",
        extra={"context": {"user_id": user_id, "catalog_size": len(catalog), "returned": len(saved)}},
    )
    return saved
