"""Shared test fixtures."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from fastapi import FastAPI

from cartelera.api.routes import health, movies
from cartelera.catalog import get_now
from cartelera.schemas import MovieSchema, SessionSchema, ShowtimeSchema

MADRID_TZ = ZoneInfo("Europe/Madrid")

# Mid-listing reference time: Friday 13 March 2026, 10:00
NOW = datetime(2026, 3, 13, 10, 0, tzinfo=MADRID_TZ)


def make_movie(title: str, showtimes: dict[str, list[str]], **fields: str) -> MovieSchema:
    """Build a catalog entry from {day: [session times]}."""
    return MovieSchema(
        title=title,
        showtimes=[
            ShowtimeSchema(day=day, sessions=[SessionSchema(time=t) for t in times])
            for day, times in showtimes.items()
        ],
        **fields,
    )


@pytest.fixture
def catalog() -> list[MovieSchema]:
    """One movie with upcoming sessions, one whose sessions are all over."""
    return [
        make_movie(
            "Nosferatu (VOSE)",
            {"Vie. 13": ["17.00-VOSE", "19.00-ES", "21.00-VOSE"]},
            director="Robert Eggers",
        ),
        make_movie("La substància", {"Jue. 12": ["16.00-VOSE", "18.00-ES"]}),
    ]


@pytest.fixture
def test_app(catalog: list[MovieSchema]) -> FastAPI:
    """Minimal FastAPI app without the lifespan, with a fixed catalog and clock."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(movies.router, prefix="/api")
    app.state.catalog = catalog
    app.dependency_overrides[get_now] = lambda: NOW
    return app
