# tests/test_api_matches.py
from fastapi.testclient import TestClient

from neighborfit.adapters.config import AppConfig
from neighborfit.api.http import create_app
from tests.fixtures.profiles import seed_matching_user, user_payload


def _create_user(client, payload=None) -> str:
    r = client.post("/api/user-preferences", json=payload or seed_matching_user())
    assert r.status_code == 200, r.text
    return r.json()["id"]


def test_generate_matches_ranks_seed_catalog(client):
    user_id = _create_user(client)

    r = client.post("/api/matches", json={"user_id": user_id})
    assert r.status_code == 200, r.text
    matches = r.json()

    assert [m["score"] for m in matches] == [100, 89, 84, 49, 45]
    top = client.get(f"/api/neighborhoods/{matches[0]['neighborhood_id']}").json()
    assert top["name"] == "Fremont"
    assert matches[0]["explanation"].startswith("Great budget fit with median rent of $1,900.")
    assert set(matches[0]["factors"]) == {
        "budget_match",
        "lifestyle_match",
        "commute_match",
        "amenity_match",
        "safety_match",
    }


def test_generated_matches_are_stored(client):
    user_id = _create_user(client)
    created = client.post("/api/matches", json={"user_id": user_id}).json()

    r = client.get(f"/api/matches/user/{user_id}")
    assert r.status_code == 200
    assert {m["id"] for m in r.json()} == {m["id"] for m in created}

    r = client.get(f"/api/matches/{created[0]['id']}")
    assert r.status_code == 200
    assert r.json()["score"] == created[0]["score"]


def test_matches_require_user_id(client):
    r = client.post("/api/matches", json={})
    assert r.status_code == 400
    assert r.json() == {"error": "User ID is required"}


def test_matches_for_unknown_user_returns_404(client):
    r = client.post("/api/matches", json={"user_id": "ghost"})
    assert r.status_code == 404


def test_unknown_match_returns_404(client):
    assert client.get("/api/matches/missing").status_code == 404


def test_user_without_matches_gets_empty_list(client):
    assert client.get("/api/matches/user/nobody").json() == []


def test_match_limit_comes_from_config():
    client = TestClient(create_app(AppConfig(MATCH_LIMIT=2)))
    user_id = _create_user(client)
    matches = client.post("/api/matches", json={"user_id": user_id}).json()
    assert [m["score"] for m in matches] == [100, 89]


def test_empty_catalog_gives_no_matches():
    client = TestClient(create_app(AppConfig(SEED_CATALOG=False)))
    user_id = _create_user(client, user_payload())
    r = client.post("/api/matches", json={"user_id": user_id})
    assert r.status_code == 200
    assert r.json() == []
