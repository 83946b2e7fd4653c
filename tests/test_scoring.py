from types import SimpleNamespace

import pytest
from hypothesis import given, strategies as st

from neighborfit.analysis.scoring import (
    FALLBACK_SCORE,
    amenity_score,
    budget_score,
    commute_score,
    lifestyle_score,
    map_preference_to_score,
    safety_score,
)
from neighborfit.domain.errors import InvalidNeighborhoodData
from tests.fixtures.profiles import make_neighborhood, make_user


# -----------------------------
# Budget
# -----------------------------

@pytest.mark.parametrize("rent", [1000, 2200, 3000])
def test_budget_inside_range_is_full_score(rent):
    user = make_user(budget={"min": 1000, "max": 3000})
    hood = make_neighborhood(housing={"median_rent": rent})
    assert budget_score(user, hood) == 100.0


def test_budget_above_max_uses_thirty_percent_tolerance():
    user = make_user(budget={"min": 1000, "max": 3000})
    hood = make_neighborhood(housing={"median_rent": 3600})
    # excess 600 over a 900 tolerance
    assert budget_score(user, hood) == pytest.approx(33.333, abs=0.01)


def test_budget_below_min_loses_half_per_tolerance():
    user = make_user(budget={"min": 1000, "max": 3000})
    hood = make_neighborhood(housing={"median_rent": 900})
    # shortfall 100 over a 200 tolerance
    assert budget_score(user, hood) == pytest.approx(75.0)


def test_budget_far_outside_floors_at_zero():
    user = make_user(budget={"min": 1000, "max": 3000})
    assert budget_score(user, make_neighborhood(housing={"median_rent": 400})) == 0.0
    assert budget_score(user, make_neighborhood(housing={"median_rent": 5000})) == 0.0


def test_budget_zero_ceiling_does_not_divide_by_zero():
    user = make_user(budget={"min": 0, "max": 0})
    hood = make_neighborhood(housing={"median_rent": 1500})
    assert budget_score(user, hood) == 0.0


# -----------------------------
# Preference mapping
# -----------------------------

@pytest.mark.parametrize(
    "level, value, expected",
    [
        ("low", 30, 100.0),
        ("unnecessary", 39.9, 100.0),
        ("low", 60, 70.0),
        ("low", 100, 10.0),
        ("moderate", 40, 100.0),
        ("preferred", 80, 100.0),
        ("moderate", 85, 50.0),
        ("moderate", 30, 40.0),
        ("high", 71, 100.0),
        ("high", 70, 98.0),
        ("required", 50, 70.0),
        ("high", 0, 0.0),
    ],
)
def test_map_preference_to_score(level, value, expected):
    assert map_preference_to_score(level, value) == pytest.approx(expected)


def test_unknown_level_falls_back_to_neutral():
    assert map_preference_to_score("sometimes", 75) == FALLBACK_SCORE == 50.0


# -----------------------------
# Lifestyle
# -----------------------------

def test_lifestyle_averages_four_factors_without_children():
    user = make_user()
    hood = make_neighborhood(lifestyle={"walk_score": 90})
    # walkability 100 - 30*2 = 40, the other three are 100
    assert lifestyle_score(user, hood) == pytest.approx((40 + 100 + 100 + 100) / 4)


def test_lifestyle_adds_family_friendliness_for_parents():
    user = make_user(lifestyle={"has_children": True})
    hood = make_neighborhood(demographics={"family_friendly": 7})
    assert lifestyle_score(user, hood) == pytest.approx((100 * 4 + 70) / 5)


def test_lifestyle_scales_nightlife_to_hundred():
    user = make_user(lifestyle={"night_life": "high"})
    quiet = make_neighborhood(lifestyle={"nightlife_score": 5})
    lively = make_neighborhood(lifestyle={"nightlife_score": 8})
    # 5 -> 50 -> 70; 8 -> 80 -> 100
    assert lifestyle_score(user, quiet) == pytest.approx((100 + 100 + 70 + 100) / 4)
    assert lifestyle_score(user, lively) == pytest.approx(100.0)


# -----------------------------
# Commute
# -----------------------------

def test_commute_within_max_is_full_score():
    user = make_user(preferences={"max_commute": 30})
    hood = make_neighborhood(
        nearby_job_hubs=[
            {"name": "Far", "distance": 20, "commute_time": 55},
            {"name": "Near", "distance": 3, "commute_time": 30},
        ]
    )
    assert commute_score(user, hood) == 100.0


def test_commute_penalized_by_relative_overrun():
    user = make_user(preferences={"max_commute": 30})
    hood = make_neighborhood(
        nearby_job_hubs=[
            {"name": "A", "distance": 10, "commute_time": 50},
            {"name": "B", "distance": 9, "commute_time": 45},
        ]
    )
    assert commute_score(user, hood) == pytest.approx(50.0)


def test_commute_overrun_floors_at_zero():
    user = make_user(preferences={"max_commute": 30})
    hood = make_neighborhood(nearby_job_hubs=[{"name": "A", "distance": 40, "commute_time": 90}])
    assert commute_score(user, hood) == 0.0


def test_commute_zero_max_with_positive_commute_is_zero():
    user = make_user(preferences={"max_commute": 0})
    hood = make_neighborhood()
    assert commute_score(user, hood) == 0.0


def test_commute_without_job_hubs_raises():
    user = make_user()
    hood = make_neighborhood(nearby_job_hubs=[])
    with pytest.raises(InvalidNeighborhoodData) as exc_info:
        commute_score(user, hood)
    assert exc_info.value.neighborhood_id == hood.id


# -----------------------------
# Amenities
# -----------------------------

def test_amenity_partial_match():
    user = make_user(preferences={"amenities": ["parks", "gyms"]})
    hood = make_neighborhood(amenities=["parks", "coffee_shops"])
    assert amenity_score(user, hood) == pytest.approx(50.0)


def test_amenity_nothing_requested_is_vacuous_match():
    user = make_user(preferences={"amenities": []})
    hood = make_neighborhood(amenities=[])
    assert amenity_score(user, hood) == 100.0


def test_amenity_match_is_case_sensitive():
    user = make_user(preferences={"amenities": ["Parks"]})
    hood = make_neighborhood(amenities=["parks"])
    assert amenity_score(user, hood) == 0.0


# -----------------------------
# Safety
# -----------------------------

@pytest.mark.parametrize(
    "priority, crime, expected",
    [
        ("high", 2, 100.0),
        ("high", 4, 50.0),
        ("high", 10, 0.0),
        ("moderate", 5, 100.0),
        ("moderate", 7, 60.0),
        ("low", 8, 100.0),
        ("low", 9, 85.0),
        ("low", 10, 70.0),
    ],
)
def test_safety_bands(priority, crime, expected):
    user = make_user(lifestyle={"safety_priority": priority})
    hood = make_neighborhood(lifestyle={"crime_rate": crime})
    assert safety_score(user, hood) == pytest.approx(expected)


def test_safety_unknown_priority_falls_back_to_neutral():
    # bypasses model validation the way a stale stored profile would
    user = SimpleNamespace(lifestyle=SimpleNamespace(safety_priority="paranoid"))
    hood = make_neighborhood(lifestyle={"crime_rate": 1})
    assert safety_score(user, hood) == 50.0


# -----------------------------
# Bounds over arbitrary inputs
# -----------------------------

_LEVELS = st.sampled_from(["low", "moderate", "high"])
_TRANSPORT = st.sampled_from(["unnecessary", "preferred", "required"])
_AMENITIES = st.lists(st.sampled_from(["parks", "gyms", "bars", "schools", "coffee_shops"]), max_size=5)


@given(
    budget_min=st.floats(min_value=0.0, max_value=10_000.0),
    budget_max=st.floats(min_value=0.0, max_value=20_000.0),
    max_commute=st.floats(min_value=0.0, max_value=300.0),
    rent=st.floats(min_value=0.0, max_value=100_000.0),
    crime=st.floats(min_value=0.0, max_value=10.0),
    walk=st.floats(min_value=0.0, max_value=100.0),
    transit=st.floats(min_value=0.0, max_value=100.0),
    nightlife=st.floats(min_value=0.0, max_value=10.0),
    outdoor=st.floats(min_value=0.0, max_value=10.0),
    family=st.floats(min_value=0.0, max_value=10.0),
    commute_times=st.lists(st.floats(min_value=0.0, max_value=10_000.0), min_size=1, max_size=4),
    has_children=st.booleans(),
    levels=st.tuples(_LEVELS, _LEVELS, _LEVELS, _LEVELS),
    transport=_TRANSPORT,
    wanted=_AMENITIES,
    offered=_AMENITIES,
)
def test_all_factor_scores_stay_within_bounds(
    budget_min, budget_max, max_commute, rent, crime, walk, transit, nightlife, outdoor,
    family, commute_times, has_children, levels, transport, wanted, offered,
):
    night_life, outdoor_activities, walkability, safety_priority = levels
    user = make_user(
        budget={"min": budget_min, "max": budget_max},
        lifestyle={
            "has_children": has_children,
            "night_life": night_life,
            "outdoor_activities": outdoor_activities,
            "public_transport": transport,
            "walkability": walkability,
            "safety_priority": safety_priority,
        },
        preferences={"max_commute": max_commute, "amenities": wanted},
    )
    hood = make_neighborhood(
        demographics={"family_friendly": family},
        housing={"median_rent": rent},
        lifestyle={
            "walk_score": walk,
            "transit_score": transit,
            "crime_rate": crime,
            "nightlife_score": nightlife,
            "outdoor_score": outdoor,
        },
        amenities=offered,
        nearby_job_hubs=[
            {"name": f"hub{i}", "distance": 1.0, "commute_time": t} for i, t in enumerate(commute_times)
        ],
    )
    for fn in (budget_score, lifestyle_score, commute_score, amenity_score, safety_score):
        value = fn(user, hood)
        assert 0.0 <= value <= 100.0, (fn.__name__, value)


@given(
    level=st.sampled_from(["low", "moderate", "high", "unnecessary", "preferred", "required", "bogus"]),
    score=st.floats(min_value=0.0, max_value=100.0),
)
def test_preference_mapping_stays_within_bounds(level, score):
    assert 0.0 <= map_preference_to_score(level, score) <= 100.0
