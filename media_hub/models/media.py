from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from media_hub.errors import InvalidType


class MediaType(str, Enum):
    """Media types exposed by the unified search surface."""

    # Jikan (MyAnimeList)
    ANIME = "anime"
    MANGA = "manga"
    NOVEL = "novel"

    # TMDb
    MOVIE = "movie"
    SERIES = "series"

    # RAWG
    GAME = "game"

    @classmethod
    def from_value(cls, value: Any) -> MediaType | None:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def parse(cls, value: Any) -> MediaType:
        media_type = cls.from_value(value)
        if media_type is None:
            raise InvalidType()
        return media_type

    @property
    def provider(self) -> str:
        return _PROVIDERS[self]


_PROVIDERS = {
    MediaType.ANIME: "jikan",
    MediaType.MANGA: "jikan",
    MediaType.NOVEL: "jikan",
    MediaType.MOVIE: "tmdb",
    MediaType.SERIES: "tmdb",
    MediaType.GAME: "rawg",
}


@dataclass(frozen=True)
class UnifiedResult:
    """
    Provider-agnostic search/trending record.

    Note: `id` is the provider's own identifier and is only unique within a
    provider + type. `score` keeps the provider's scale.
    """

    id: int
    title: str
    type: MediaType
    image: str | None = None
    description: str | None = None
    score: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "image": self.image,
            "description": self.description,
            "type": self.type.value,
            "score": self.score,
        }
