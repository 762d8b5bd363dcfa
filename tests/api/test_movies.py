"""Tests for the movie browsing API endpoints."""

from pathlib import Path

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cartelera.catalog import read_catalog
from cartelera.schemas import dump_catalog
from cartelera.scrapers.models import MovieRecord, Session, ShowtimeGroup


def client_for(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestGetDays:
    async def test_lists_only_days_with_upcoming_sessions(self, test_app: FastAPI) -> None:
        async with client_for(test_app) as client:
            response = await client.get("/api/days")

        assert response.status_code == 200
        assert response.json() == ["Vie. 13"]

    async def test_empty_catalog_has_no_days(self, test_app: FastAPI) -> None:
        test_app.state.catalog = []
        async with client_for(test_app) as client:
            response = await client.get("/api/days")

        assert response.json() == []


class TestGetMovies:
    async def test_all_days_hides_fully_past_movie(self, test_app: FastAPI) -> None:
        async with client_for(test_app) as client:
            response = await client.get("/api/movies")

        data = response.json()
        assert response.status_code == 200
        assert [m["title"] for m in data["movies"]] == ["Nosferatu (VOSE)"]
        assert data["total"] == 1
        assert data["day"] == "all"
        assert data["days"] == ["Vie. 13"]
        assert data["message"] is None

    async def test_search_is_case_insensitive(self, test_app: FastAPI) -> None:
        async with client_for(test_app) as client:
            response = await client.get("/api/movies", params={"q": "NOSFER"})

        assert response.json()["total"] == 1

    async def test_no_match_returns_no_results_message(self, test_app: FastAPI) -> None:
        async with client_for(test_app) as client:
            response = await client.get("/api/movies", params={"q": "dune"})

        data = response.json()
        assert data["movies"] == []
        assert data["message"] == "No results"

    async def test_filters_by_day(self, test_app: FastAPI) -> None:
        async with client_for(test_app) as client:
            response = await client.get("/api/movies", params={"day": "Vie. 13"})

        data = response.json()
        assert data["total"] == 1
        assert data["movies"][0]["showtimes"][0]["day"] == "Vie. 13"

    async def test_past_day_filter_is_empty(self, test_app: FastAPI) -> None:
        async with client_for(test_app) as client:
            response = await client.get("/api/movies", params={"day": "Jue. 12"})

        assert response.json()["total"] == 0


class TestReadCatalog:
    def test_missing_file_gives_empty_catalog(self, tmp_path: Path) -> None:
        assert read_catalog(tmp_path / "data.json") == []

    def test_reads_written_catalog(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_bytes(
            dump_catalog(
                [
                    MovieRecord(
                        title="Nosferatu",
                        showtimes=[ShowtimeGroup(day="Vie. 13", sessions=[Session("17.00")])],
                    )
                ]
            )
        )

        movies = read_catalog(path)

        assert len(movies) == 1
        assert movies[0].title == "Nosferatu"
        assert movies[0].showtimes[0].sessions[0].link is None
