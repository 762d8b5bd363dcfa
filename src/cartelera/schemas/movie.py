"""Pydantic schemas for the catalog artifact."""

from dataclasses import asdict

from pydantic import BaseModel, TypeAdapter

from cartelera.scrapers.models import MovieRecord


class SessionSchema(BaseModel):
    """One screening time and its purchase link."""

    time: str
    link: str | None = None


class ShowtimeSchema(BaseModel):
    """Sessions for one day token."""

    day: str
    sessions: list[SessionSchema]


class MovieSchema(BaseModel):
    """Movie entry as written to data.json."""

    title: str
    image: str | None = None
    duration: str | None = None
    director: str | None = None
    cast: str | None = None
    synopsis: str | None = None
    showtimes: list[ShowtimeSchema]


CatalogAdapter = TypeAdapter(list[MovieSchema])


def dump_catalog(movies: list[MovieRecord]) -> bytes:
    """Serialize movies to indented UTF-8 JSON, keeping their order."""
    catalog = CatalogAdapter.validate_python([asdict(m) for m in movies])
    return CatalogAdapter.dump_json(catalog, indent=2)


def load_catalog(data: str | bytes) -> list[MovieSchema]:
    """Parse a catalog artifact."""
    return CatalogAdapter.validate_json(data)
