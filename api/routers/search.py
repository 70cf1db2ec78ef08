"""
Unified search and trending endpoints.
"""
from __future__ import annotations

from fastapi import APIRouter, Query
from pydantic import BaseModel

from api.deps import Aggregator
from media_hub.models.media import MediaType

router = APIRouter(tags=["search"])


# --- Pydantic models ---

class MediaResult(BaseModel):
    id: int
    title: str
    image: str | None = None
    description: str | None = None
    type: MediaType
    score: float | None = None


class ErrorMessage(BaseModel):
    message: str


# --- Endpoints ---

@router.get("/trending/{media_type}", response_model=list[MediaResult])
def trending(aggregator: Aggregator, media_type: str) -> list[dict]:
    """Currently popular items for a media type. Always 200; empty on failure."""
    return [result.to_dict() for result in aggregator.trending(media_type)]


@router.get(
    "/{media_type}",
    response_model=list[MediaResult],
    responses={400: {"model": ErrorMessage}, 500: {"model": ErrorMessage}},
)
def search(
    aggregator: Aggregator,
    media_type: str,
    query: str | None = Query(default=None),
) -> list[dict]:
    """Search a single provider for `query` and return normalized results."""
    return [result.to_dict() for result in aggregator.search(media_type, query)]
