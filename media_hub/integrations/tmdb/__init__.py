"""
TMDb integration client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from media_hub.integrations.tmdb.client import (
        build_auth,
        fetch_trending,
        poster_url,
        search,
    )

__all__ = [
    "build_auth",
    "fetch_trending",
    "poster_url",
    "search",
]


def __getattr__(name: str):
    if name in __all__:
        from media_hub.integrations.tmdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
