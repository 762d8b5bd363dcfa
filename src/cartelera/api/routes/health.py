"""Health check endpoint."""

from fastapi import APIRouter, Depends

from cartelera.catalog import get_catalog
from cartelera.schemas import MovieSchema

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(movies: list[MovieSchema] = Depends(get_catalog)) -> dict[str, str | int]:
    """Report that the API is up and how many movies the loaded catalog holds."""
    return {"status": "ok", "movies": len(movies)}
