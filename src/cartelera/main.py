"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cartelera.api.routes import health, movies
from cartelera.catalog import read_catalog
from cartelera.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: the catalog is read once, the API never writes it
    app.state.catalog = read_catalog(settings.output_path)
    yield


# Create FastAPI app
app = FastAPI(
    title="Cartelera API",
    description="Showtime catalog browser for a single cinema",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
    ],  # Frontend development server
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(movies.router, prefix="/api", tags=["movies"])
