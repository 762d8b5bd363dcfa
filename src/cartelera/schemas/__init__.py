"""Pydantic schemas for the catalog artifact and API responses."""

from cartelera.schemas.catalog import CatalogView
from cartelera.schemas.movie import (
    CatalogAdapter,
    MovieSchema,
    SessionSchema,
    ShowtimeSchema,
    dump_catalog,
    load_catalog,
)

__all__ = [
    "CatalogAdapter",
    "CatalogView",
    "MovieSchema",
    "SessionSchema",
    "ShowtimeSchema",
    "dump_catalog",
    "load_catalog",
]
