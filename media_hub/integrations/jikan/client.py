from __future__ import annotations

from typing import Any

import requests

from media_hub.config import JIKAN_API_BASE_URL
from media_hub.integrations.http import DEFAULT_TIMEOUT_SECONDS, request_json, require_list

PROVIDER = "jikan"

CATEGORIES = frozenset({"anime", "manga"})


def _require_category(category: str) -> str:
    if category not in CATEGORIES:
        raise ValueError(f"Unsupported Jikan category: {category!r}")
    return category


def search_titles(
    category: str,
    query: str,
    *,
    limit: int = 25,
    session: requests.Session | None = None,
    base_url: str = JIKAN_API_BASE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict[str, Any]]:
    """
    Search `/{category}` (anime or manga) and return the raw `data` items.

    Jikan has no separate novel endpoint; novels come back from the manga
    search with `type` set to "Novel" or "Light Novel".
    """

    category = _require_category(category)
    session = session or requests.Session()
    payload = request_json(
        session,
        f"{base_url}/{category}",
        provider=PROVIDER,
        params={"q": query, "limit": limit},
        timeout_seconds=timeout_seconds,
    )
    return require_list(payload, "data", provider=PROVIDER)


def fetch_top(
    category: str,
    *,
    subtype: str | None = None,
    session: requests.Session | None = None,
    base_url: str = JIKAN_API_BASE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict[str, Any]]:
    """
    Fetch `/top/{category}`. `subtype` is passed as Jikan's `type` filter
    (e.g. "lightnovel" for top manga).
    """

    category = _require_category(category)
    session = session or requests.Session()
    params: dict[str, Any] = {}
    if subtype:
        params["type"] = subtype
    payload = request_json(
        session,
        f"{base_url}/top/{category}",
        provider=PROVIDER,
        params=params,
        timeout_seconds=timeout_seconds,
    )
    return require_list(payload, "data", provider=PROVIDER)
