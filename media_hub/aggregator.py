"""
Unified search/trending over Jikan, TMDb and RAWG.

Every call issues exactly one provider request. Search fails hard with
`UpstreamError` when the provider fails; trending logs and returns `[]`.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import requests

from media_hub.config import Settings
from media_hub.errors import InvalidInput, UpstreamError
from media_hub.integrations import jikan, rawg
from media_hub.integrations.http import ProviderClientError
from media_hub.integrations.tmdb import client as tmdb
from media_hub.models.media import MediaType, UnifiedResult
from media_hub.normalize import from_jikan, from_rawg, from_tmdb, is_novel

logger = logging.getLogger(__name__)

JIKAN_SEARCH_LIMIT = 25
TRENDING_LIMIT = 20
RAWG_TRENDING_PAGE_SIZE = 20
TMDB_TRENDING_WINDOW = "week"
JIKAN_TOP_NOVEL_SUBTYPE = "lightnovel"

_JIKAN_CATEGORIES = {
    MediaType.ANIME: "anime",
    MediaType.MANGA: "manga",
    MediaType.NOVEL: "manga",
}

_TMDB_CATEGORIES = {
    MediaType.MOVIE: "movie",
    MediaType.SERIES: "tv",
}

SearchHandler = Callable[[MediaType, str], list[UnifiedResult]]
TrendingHandler = Callable[[MediaType], list[UnifiedResult]]


class MediaAggregator:
    def __init__(self, settings: Settings, *, session: requests.Session | None = None) -> None:
        # A shared session is for single-threaded callers; without one each provider call opens its own.
        self.settings = settings
        self.session = session

        self._search_handlers: Mapping[MediaType, SearchHandler] = {
            MediaType.ANIME: self._search_jikan,
            MediaType.MANGA: self._search_jikan,
            MediaType.NOVEL: self._search_jikan,
            MediaType.MOVIE: self._search_tmdb,
            MediaType.SERIES: self._search_tmdb,
            MediaType.GAME: self._search_rawg,
        }
        self._trending_handlers: Mapping[MediaType, TrendingHandler] = {
            MediaType.ANIME: self._trending_jikan,
            MediaType.MANGA: self._trending_jikan,
            MediaType.NOVEL: self._trending_jikan,
            MediaType.MOVIE: self._trending_tmdb,
            MediaType.SERIES: self._trending_tmdb,
            MediaType.GAME: self._trending_rawg,
        }
        for name, table in (("search", self._search_handlers), ("trending", self._trending_handlers)):
            missing = set(MediaType) - set(table)
            if missing:
                raise RuntimeError(f"No {name} handler for: {sorted(m.value for m in missing)}")

    def close(self) -> None:
        if self.session is not None:
            self.session.close()

    # --- Public operations ---

    def search(self, media_type: Any, query: str | None) -> list[UnifiedResult]:
        """
        Search one provider and return normalized results in provider order.

        Raises:
            InvalidInput: `query` is missing or blank.
            InvalidType: `media_type` is not a known `MediaType`.
            UpstreamError: the provider call or its payload failed.
        """

        if not query or not query.strip():
            raise InvalidInput()
        resolved = MediaType.parse(media_type)

        try:
            return self._search_handlers[resolved](resolved, query)
        except ProviderClientError as exc:
            logger.error("Search error for %s via %s: %s", resolved.value, resolved.provider, exc)
            raise UpstreamError(provider=resolved.provider, cause=exc) from exc

    def trending(self, media_type: Any) -> list[UnifiedResult]:
        """
        Return up to 20 currently popular items. Unknown types and provider
        failures both yield an empty list.
        """

        resolved = MediaType.from_value(media_type)
        if resolved is None:
            return []

        try:
            results = self._trending_handlers[resolved](resolved)
        except ProviderClientError as exc:
            logger.warning("Trending API error for %s via %s: %s", resolved.value, resolved.provider, exc)
            return []
        return results[:TRENDING_LIMIT]

    # --- Search handlers ---

    def _search_jikan(self, media_type: MediaType, query: str) -> list[UnifiedResult]:
        items = jikan.search_titles(
            _JIKAN_CATEGORIES[media_type],
            query,
            limit=JIKAN_SEARCH_LIMIT,
            session=self.session,
            base_url=self.settings.jikan_base_url,
            timeout_seconds=self.settings.http_timeout_seconds,
        )
        if media_type is MediaType.NOVEL:
            items = [item for item in items if is_novel(item)]
        return [from_jikan(item, media_type) for item in items]

    def _search_tmdb(self, media_type: MediaType, query: str) -> list[UnifiedResult]:
        items = tmdb.search(
            _TMDB_CATEGORIES[media_type],
            query,
            api_key=self.settings.tmdb_api_key,
            session=self.session,
            base_url=self.settings.tmdb_base_url,
            timeout_seconds=self.settings.http_timeout_seconds,
        )
        return self._map_tmdb(items, media_type)

    def _search_rawg(self, media_type: MediaType, query: str) -> list[UnifiedResult]:
        items = rawg.search_games(
            query,
            api_key=self.settings.rawg_api_key,
            session=self.session,
            base_url=self.settings.rawg_base_url,
            timeout_seconds=self.settings.http_timeout_seconds,
        )
        return [from_rawg(item) for item in items]

    # --- Trending handlers ---

    def _trending_jikan(self, media_type: MediaType) -> list[UnifiedResult]:
        # Top listings filter novels on the provider side instead of post-filtering.
        items = jikan.fetch_top(
            _JIKAN_CATEGORIES[media_type],
            subtype=JIKAN_TOP_NOVEL_SUBTYPE if media_type is MediaType.NOVEL else None,
            session=self.session,
            base_url=self.settings.jikan_base_url,
            timeout_seconds=self.settings.http_timeout_seconds,
        )
        return [from_jikan(item, media_type) for item in items]

    def _trending_tmdb(self, media_type: MediaType) -> list[UnifiedResult]:
        items = tmdb.fetch_trending(
            _TMDB_CATEGORIES[media_type],
            api_key=self.settings.tmdb_api_key,
            window=TMDB_TRENDING_WINDOW,
            session=self.session,
            base_url=self.settings.tmdb_base_url,
            timeout_seconds=self.settings.http_timeout_seconds,
        )
        return self._map_tmdb(items, media_type)

    def _trending_rawg(self, media_type: MediaType) -> list[UnifiedResult]:
        items = rawg.fetch_popular_games(
            api_key=self.settings.rawg_api_key,
            page_size=RAWG_TRENDING_PAGE_SIZE,
            session=self.session,
            base_url=self.settings.rawg_base_url,
            timeout_seconds=self.settings.http_timeout_seconds,
        )
        return [from_rawg(item) for item in items]

    def _map_tmdb(self, items: list[Any], media_type: MediaType) -> list[UnifiedResult]:
        return [
            from_tmdb(item, media_type, image_base_url=self.settings.tmdb_image_base_url)
            for item in items
        ]
