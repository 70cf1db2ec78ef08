"""
Map provider listing items into `UnifiedResult`.

Mappers raise `ProviderClientError` for items that cannot produce a record
(not an object, no integer id, no title) so the caller can treat the whole
response as malformed.
"""
from __future__ import annotations

from typing import Any, Mapping

from media_hub.config import TMDB_IMAGE_BASE_URL
from media_hub.integrations.http import ProviderClientError
from media_hub.integrations.tmdb.client import poster_url
from media_hub.models.media import MediaType, UnifiedResult

NOVEL_SUBTYPES = frozenset({"Novel", "Light Novel"})


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        raw = value.strip()
        if raw.isdecimal():
            try:
                return int(raw)
            except ValueError:
                return None
    return None


def _as_score(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def _as_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _require_item(item: Any, *, provider: str) -> Mapping[str, Any]:
    if not isinstance(item, Mapping):
        raise ProviderClientError(f"{provider} returned a non-object item.", provider=provider)
    return item


def _require_id(value: Any, *, provider: str) -> int:
    item_id = _as_int(value)
    if item_id is None:
        raise ProviderClientError(f"{provider} item has no usable id: {value!r}", provider=provider)
    return item_id


def _require_title(*candidates: Any, provider: str, item_id: int) -> str:
    for candidate in candidates:
        if isinstance(candidate, str) and candidate.strip():
            return candidate
    raise ProviderClientError(f"{provider} item {item_id} has no title.", provider=provider)


def _jikan_image(item: Mapping[str, Any]) -> str | None:
    images = item.get("images")
    if not isinstance(images, Mapping):
        return None
    jpg = images.get("jpg")
    if not isinstance(jpg, Mapping):
        return None
    return _as_text(jpg.get("image_url"))


def is_novel(item: Any) -> bool:
    """True when Jikan reports the manga entry as a novel or light novel."""
    return _require_item(item, provider="jikan").get("type") in NOVEL_SUBTYPES


def from_jikan(item: Any, media_type: MediaType) -> UnifiedResult:
    item = _require_item(item, provider="jikan")
    item_id = _require_id(item.get("mal_id"), provider="jikan")
    return UnifiedResult(
        id=item_id,
        title=_require_title(item.get("title"), provider="jikan", item_id=item_id),
        image=_jikan_image(item),
        description=_as_text(item.get("synopsis")),
        type=media_type,
        score=_as_score(item.get("score")),
    )


def from_tmdb(
    item: Any,
    media_type: MediaType,
    *,
    image_base_url: str = TMDB_IMAGE_BASE_URL,
) -> UnifiedResult:
    # Movies carry `title`, TV series carry `name`.
    item = _require_item(item, provider="tmdb")
    item_id = _require_id(item.get("id"), provider="tmdb")
    return UnifiedResult(
        id=item_id,
        title=_require_title(item.get("title"), item.get("name"), provider="tmdb", item_id=item_id),
        image=poster_url(item.get("poster_path"), image_base_url=image_base_url),
        description=_as_text(item.get("overview")),
        type=media_type,
        score=_as_score(item.get("vote_average")),
    )


def from_rawg(item: Any) -> UnifiedResult:
    item = _require_item(item, provider="rawg")
    item_id = _require_id(item.get("id"), provider="rawg")
    return UnifiedResult(
        id=item_id,
        title=_require_title(item.get("name"), provider="rawg", item_id=item_id),
        image=_as_text(item.get("background_image")),
        description=None,
        type=MediaType.GAME,
        score=_as_score(item.get("rating")),
    )
