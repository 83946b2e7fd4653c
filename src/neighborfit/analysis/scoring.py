# src/neighborfit/analysis/scoring.py
from __future__ import annotations

from neighborfit.domain.errors import InvalidNeighborhoodData
from neighborfit.domain.neighborhood import Neighborhood
from neighborfit.domain.preferences import UserPreferences

# Returned for a preference level outside the closed sets. Upstream
# validation should make this unreachable for API-created profiles.
FALLBACK_SCORE = 50.0

# Budget tolerances, as a fraction of the budget edge they apply to
BELOW_MIN_TOLERANCE = 0.2
ABOVE_MAX_TOLERANCE = 0.3


def _clamp(x: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, float(x)))


# =====================================================================
# Preference mapping
# =====================================================================


def map_preference_to_score(level: str, neighborhood_score: float) -> float:
    """
    Map a qualitative user level onto a 0-100 neighborhood metric.

      low / unnecessary   -> happiest below 40, penalized 1.5/pt above
      moderate / preferred -> happiest in [40, 80], else 2/pt off 60
      high / required     -> happiest above 70, else score * 1.4

    Anything else scores FALLBACK_SCORE.
    """
    s = float(neighborhood_score)

    if level in ("low", "unnecessary"):
        return 100.0 if s < 40 else _clamp(100.0 - (s - 40.0) * 1.5)
    if level in ("moderate", "preferred"):
        return 100.0 if 40 <= s <= 80 else _clamp(100.0 - abs(s - 60.0) * 2.0)
    if level in ("high", "required"):
        return 100.0 if s > 70 else _clamp(s * 1.4)
    return FALLBACK_SCORE


# =====================================================================
# Factor scores (each 0-100)
# =====================================================================


def budget_score(user: UserPreferences, neighborhood: Neighborhood) -> float:
    """
    100 inside [budget.min, budget.max].

    Cheaper than the floor loses 50 points per 20% of min; pricier than
    the ceiling loses 100 points per 30% of max.
    """
    lo = float(user.budget.min)
    hi = float(user.budget.max)
    rent = float(neighborhood.housing.median_rent)

    if lo <= rent <= hi:
        return 100.0

    if rent < lo:
        tolerance = lo * BELOW_MIN_TOLERANCE
        if tolerance <= 0:
            return 0.0
        return _clamp(100.0 - ((lo - rent) / tolerance) * 50.0)

    if rent > hi:
        tolerance = hi * ABOVE_MAX_TOLERANCE
        if tolerance <= 0:
            return 0.0
        return _clamp(100.0 - ((rent - hi) / tolerance) * 100.0)

    # min > max leaves a gap no rent can fall into
    return 0.0


def lifestyle_score(user: UserPreferences, neighborhood: Neighborhood) -> float:
    prefs = user.lifestyle
    hood = neighborhood.lifestyle

    parts = [
        map_preference_to_score(prefs.walkability, hood.walk_score),
        map_preference_to_score(prefs.public_transport, hood.transit_score),
        # nightlife / outdoor are 0-10 in the catalog
        map_preference_to_score(prefs.night_life, hood.nightlife_score * 10),
        map_preference_to_score(prefs.outdoor_activities, hood.outdoor_score * 10),
    ]
    if prefs.has_children:
        parts.append(_clamp(neighborhood.demographics.family_friendly * 10))

    return _clamp(sum(parts) / len(parts))


def commute_score(user: UserPreferences, neighborhood: Neighborhood) -> float:
    """
    Score the fastest job hub against the user's max commute.

    Raises InvalidNeighborhoodData when the neighborhood lists no job hubs.
    """
    hubs = neighborhood.nearby_job_hubs
    if not hubs:
        raise InvalidNeighborhoodData(
            getattr(neighborhood, "id", None) or neighborhood.name,
            "no nearby job hubs to compute a commute from",
        )

    max_commute = float(user.preferences.max_commute)
    shortest = min(float(h.commute_time) for h in hubs)

    if shortest <= max_commute:
        return 100.0
    if max_commute <= 0:
        return 0.0

    penalty = (shortest - max_commute) / max_commute
    return _clamp(100.0 - penalty * 100.0)


def amenity_score(user: UserPreferences, neighborhood: Neighborhood) -> float:
    wanted = user.preferences.amenities
    if not wanted:
        return 100.0

    available = set(neighborhood.amenities)
    matched = [a for a in wanted if a in available]
    return _clamp(len(matched) / len(wanted) * 100.0)


# priority -> (crime rate tolerated at full score, points lost per unit above)
_SAFETY_BANDS: dict[str, tuple[float, float]] = {
    "high": (2.0, 25.0),
    "moderate": (5.0, 20.0),
    "low": (8.0, 15.0),
}


def safety_score(user: UserPreferences, neighborhood: Neighborhood) -> float:
    band = _SAFETY_BANDS.get(user.lifestyle.safety_priority)
    if band is None:
        return FALLBACK_SCORE

    threshold, slope = band
    crime = float(neighborhood.lifestyle.crime_rate)
    if crime <= threshold:
        return 100.0
    return _clamp(100.0 - (crime - threshold) * slope)
