"""
RAWG video game database client.
"""

from media_hub.integrations.rawg.client import fetch_popular_games, search_games

__all__ = [
    "fetch_popular_games",
    "search_games",
]
