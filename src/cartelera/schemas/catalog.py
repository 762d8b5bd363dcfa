"""Pydantic schemas for the browsing view."""

from pydantic import BaseModel

from cartelera.schemas.movie import MovieSchema


class CatalogView(BaseModel):
    """Filtered catalog ready for display."""

    search: str
    day: str
    days: list[str]  # Selectable day filters, in listing order
    movies: list[MovieSchema]
    total: int
    message: str | None = None  # Set when no movie matches the filters
