from __future__ import annotations

from typing import Any

import requests

from media_hub.config import TMDB_API_BASE_URL, TMDB_IMAGE_BASE_URL
from media_hub.integrations.http import (
    DEFAULT_TIMEOUT_SECONDS,
    ProviderClientError,
    request_json,
    require_list,
)

PROVIDER = "tmdb"

CATEGORIES = frozenset({"movie", "tv"})
TIME_WINDOWS = frozenset({"day", "week"})


def _require_category(category: str) -> str:
    if category not in CATEGORIES:
        raise ValueError(f"Unsupported TMDb category: {category!r}")
    return category


def build_auth(api_key: str | None) -> tuple[dict[str, Any], dict[str, str]]:
    """
    Return `(params, headers)` carrying the TMDb credential.

    v4 read-access tokens are JWTs (they contain `.`) and must go in the
    Authorization header; v3 API keys go in the `api_key` query parameter.
    A credential is only ever sent one way.
    """

    resolved = (api_key or "").strip()
    if not resolved:
        raise ProviderClientError("TMDB_API_KEY is not set.", provider=PROVIDER)
    if "." in resolved:
        return {}, {"Authorization": f"Bearer {resolved}"}
    return {"api_key": resolved}, {}


def poster_url(poster_path: str | None, *, image_base_url: str = TMDB_IMAGE_BASE_URL) -> str | None:
    if not isinstance(poster_path, str) or not poster_path:
        return None
    return f"{image_base_url}{poster_path}"


def search(
    category: str,
    query: str,
    *,
    api_key: str | None,
    session: requests.Session | None = None,
    base_url: str = TMDB_API_BASE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict[str, Any]]:
    """
    Search `/search/{category}` (movie or tv) and return the raw `results`.
    """

    category = _require_category(category)
    params, headers = build_auth(api_key)
    params["query"] = query
    session = session or requests.Session()
    payload = request_json(
        session,
        f"{base_url}/search/{category}",
        provider=PROVIDER,
        params=params,
        headers=headers,
        timeout_seconds=timeout_seconds,
    )
    return require_list(payload, "results", provider=PROVIDER)


def fetch_trending(
    category: str,
    *,
    api_key: str | None,
    window: str = "week",
    session: requests.Session | None = None,
    base_url: str = TMDB_API_BASE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict[str, Any]]:
    """
    Fetch `/trending/{category}/{window}` and return the raw `results`.
    """

    category = _require_category(category)
    if window not in TIME_WINDOWS:
        raise ValueError(f"Unsupported TMDb trending window: {window!r}")
    params, headers = build_auth(api_key)
    session = session or requests.Session()
    payload = request_json(
        session,
        f"{base_url}/trending/{category}/{window}",
        provider=PROVIDER,
        params=params,
        headers=headers,
        timeout_seconds=timeout_seconds,
    )
    return require_list(payload, "results", provider=PROVIDER)
