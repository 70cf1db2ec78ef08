from __future__ import annotations

import logging
from typing import Any, Mapping

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 20.0

_DEFAULT_HEADERS = {
    "accept": "application/json",
    "user-agent": "media-hub/0.1",
}


class ProviderClientError(RuntimeError):
    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        status_code: int | None = None,
        body_snippet: str | None = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.body_snippet = body_snippet


def request_json(
    session: requests.Session,
    url: str,
    *,
    provider: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """
    Issue a single GET and return the decoded JSON object.

    There is no retry: any transport error, non-200 status or non-object body
    raises `ProviderClientError`.
    """

    merged_headers = dict(_DEFAULT_HEADERS)
    if headers:
        merged_headers.update(headers)

    logger.debug("%s request: GET %s", provider, url)
    try:
        resp = session.get(url, params=params, headers=merged_headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise ProviderClientError(f"{provider} request failed: {exc}", provider=provider) from exc

    if resp.status_code != 200:
        raise ProviderClientError(
            f"{provider} request failed with HTTP {resp.status_code}.",
            provider=provider,
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ProviderClientError(
            f"{provider} returned non-JSON response.",
            provider=provider,
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        raise ProviderClientError(
            f"{provider} returned unexpected JSON shape (not an object).",
            provider=provider,
            status_code=resp.status_code,
        )
    return payload


def require_list(payload: Mapping[str, Any], key: str, *, provider: str) -> list[Any]:
    items = payload.get(key)
    if not isinstance(items, list):
        raise ProviderClientError(f"{provider} response missing `{key}` list.", provider=provider)
    return items
