from __future__ import annotations

from typing import Any

import requests

from media_hub.config import RAWG_API_BASE_URL
from media_hub.integrations.http import (
    DEFAULT_TIMEOUT_SECONDS,
    ProviderClientError,
    request_json,
    require_list,
)

PROVIDER = "rawg"


def _require_api_key(api_key: str | None) -> str:
    resolved = (api_key or "").strip()
    if not resolved:
        raise ProviderClientError("RAWG_API_KEY is not set.", provider=PROVIDER)
    return resolved


def _fetch_games(
    params: dict[str, Any],
    *,
    session: requests.Session | None,
    base_url: str,
    timeout_seconds: float,
) -> list[dict[str, Any]]:
    session = session or requests.Session()
    payload = request_json(
        session,
        f"{base_url}/games",
        provider=PROVIDER,
        params=params,
        timeout_seconds=timeout_seconds,
    )
    return require_list(payload, "results", provider=PROVIDER)


def search_games(
    query: str,
    *,
    api_key: str | None,
    session: requests.Session | None = None,
    base_url: str = RAWG_API_BASE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict[str, Any]]:
    """
    Search `/games` by free text. The listing payload has no description;
    that would need a `/games/{id}` call, which is not made here.
    """

    params = {"key": _require_api_key(api_key), "search": query}
    return _fetch_games(params, session=session, base_url=base_url, timeout_seconds=timeout_seconds)


def fetch_popular_games(
    *,
    api_key: str | None,
    page_size: int = 20,
    ordering: str = "-added",
    session: requests.Session | None = None,
    base_url: str = RAWG_API_BASE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict[str, Any]]:
    params = {"key": _require_api_key(api_key), "ordering": ordering, "page_size": page_size}
    return _fetch_games(params, session=session, base_url=base_url, timeout_seconds=timeout_seconds)
