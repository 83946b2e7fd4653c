# src/neighborfit/api/http.py
from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from neighborfit.adapters.config import AppConfig, config
from neighborfit.adapters.logging_utils import get_logger
from neighborfit.adapters.memory_repo import (
    InMemoryMatchRepository,
    InMemoryNeighborhoodRepository,
    InMemoryUserPreferencesRepository,
)
from neighborfit.adapters.seed import seed_neighborhoods
from neighborfit.analysis.catalog import summarize_catalog
from neighborfit.domain.errors import NotFoundError
from neighborfit.domain.match import Match
from neighborfit.domain.neighborhood import Neighborhood
from neighborfit.domain.preferences import UserPreferences
from neighborfit.services.matching import generate_matches
from .schemas import (
    CatalogAnalytics,
    DeleteResponse,
    MatchRequest,
    NeighborhoodCreate,
    UserPreferencesCreate,
    UserPreferencesUpdate,
)

logger = get_logger(__name__)


def create_app(settings: AppConfig | None = None) -> FastAPI:
    """
    Build the API with its own in-memory stores.

    Each call gets a fresh catalog (seeded when SEED_CATALOG is on), so
    tests can spin up isolated instances.
    """
    cfg = settings or config

    app = FastAPI(title="NeighborFit API")

    users = InMemoryUserPreferencesRepository()
    neighborhoods = InMemoryNeighborhoodRepository(seed_neighborhoods() if cfg.SEED_CATALOG else None)
    matches = InMemoryMatchRepository()

    app.state.users = users
    app.state.neighborhoods = neighborhoods
    app.state.matches = matches

    # -----------------------------
    # Error mapping
    # -----------------------------
    @app.exception_handler(RequestValidationError)
    async def _invalid_input(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid input", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def _internal_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error", extra={"context": {"path": request.url.path}})
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # -----------------------------
    # User preferences
    # -----------------------------
    @app.post("/api/user-preferences", response_model=UserPreferences)
    def create_user_preferences(payload: UserPreferencesCreate) -> UserPreferences:
        return users.create(payload)

    @app.get("/api/user-preferences/{user_id}", response_model=UserPreferences)
    def get_user_preferences(user_id: str) -> UserPreferences:
        rec = users.get(user_id)
        if rec is None:
            raise NotFoundError("user preferences", user_id)
        return rec

    @app.put("/api/user-preferences/{user_id}", response_model=UserPreferences)
    def update_user_preferences(user_id: str, payload: UserPreferencesUpdate) -> UserPreferences:
        rec = users.update(user_id, payload.changes())
        if rec is None:
            raise NotFoundError("user preferences", user_id)
        return rec

    @app.delete("/api/user-preferences/{user_id}", response_model=DeleteResponse)
    def delete_user_preferences(user_id: str) -> DeleteResponse:
        if not users.delete(user_id):
            raise NotFoundError("user preferences", user_id)
        return DeleteResponse(deleted=True)

    # -----------------------------
    # Neighborhoods
    # -----------------------------
    @app.get("/api/neighborhoods", response_model=list[Neighborhood])
    def list_neighborhoods(
        city: str | None = Query(None),
        state: str | None = Query(None),
        max_rent: float | None = Query(None, ge=0),
    ) -> list[Neighborhood]:
        if city or state or max_rent is not None:
            return neighborhoods.search(city=city, state=state, max_rent=max_rent)
        return neighborhoods.list_all()

    @app.get("/api/neighborhoods/{neighborhood_id}", response_model=Neighborhood)
    def get_neighborhood(neighborhood_id: str) -> Neighborhood:
        rec = neighborhoods.get(neighborhood_id)
        if rec is None:
            raise NotFoundError("neighborhood", neighborhood_id)
        return rec

    @app.post("/api/neighborhoods", response_model=Neighborhood)
    def create_neighborhood(payload: NeighborhoodCreate) -> Neighborhood:
        return neighborhoods.create(payload)

    # -----------------------------
    # Matches
    # -----------------------------
    @app.post("/api/matches", response_model=list[Match])
    def create_matches(body: MatchRequest) -> list[Match]:
        if not body.user_id:
            raise HTTPException(status_code=400, detail="User ID is required")
        return generate_matches(
            body.user_id,
            users=users,
            neighborhoods=neighborhoods,
            matches=matches,
            limit=cfg.MATCH_LIMIT,
            skip_invalid=cfg.SKIP_INVALID_NEIGHBORHOODS,
        )

    @app.get("/api/matches/user/{user_id}", response_model=list[Match])
    def list_user_matches(user_id: str) -> list[Match]:
        return matches.list_for_user(user_id)

    @app.get("/api/matches/{match_id}", response_model=Match)
    def get_match(match_id: str) -> Match:
        rec = matches.get(match_id)
        if rec is None:
            raise NotFoundError("match", match_id)
        return rec

    # -----------------------------
    # Analytics
    # -----------------------------
    @app.get("/api/analytics/neighborhoods", response_model=CatalogAnalytics)
    def neighborhood_analytics() -> CatalogAnalytics:
        return CatalogAnalytics(**summarize_catalog(neighborhoods.list_all()))

    return app


app = create_app()
