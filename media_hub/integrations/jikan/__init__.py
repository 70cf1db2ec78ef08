"""
Jikan (MyAnimeList) client.
"""

from media_hub.integrations.jikan.client import fetch_top, search_titles

__all__ = [
    "fetch_top",
    "search_titles",
]
