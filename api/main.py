"""
Media Hub API - FastAPI application.

Provides endpoints for:
- Searching anime, manga and novels (Jikan), movies and series (TMDb), games (RAWG)
- Trending listings for the same media types
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.deps import get_settings
from api.routers import search
from media_hub.errors import MediaHubError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    logger.info("Starting up Media Hub API...")
    yield
    # Shutdown
    logger.info("Shutting down Media Hub API...")


app = FastAPI(
    title="Media Hub API",
    description="Unified search over anime, manga, novel, movie, series and game catalogs",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
# Set CORS_ALLOW_ORIGINS env var with comma-separated origins for production
# If no origins configured, allows all origins but disables credentials
cors_origins = list(get_settings().cors_allow_origins)
allow_credentials = len(cors_origins) > 0

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if cors_origins else ["*"],
    allow_credentials=allow_credentials,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(MediaHubError)
async def media_hub_error_handler(request: Request, exc: MediaHubError) -> JSONResponse:
    # Only the client-safe message is returned; upstream causes stay in the logs.
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "media-hub"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Search router last: its `/{media_type}` path would otherwise shadow `/health`.
app.include_router(search.router)
