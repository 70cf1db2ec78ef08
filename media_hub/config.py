"""
Process configuration: provider credentials, base URLs and HTTP timeout.

Settings are read once at startup and passed to the aggregator; nothing else
should read these environment variables directly.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

JIKAN_API_BASE_URL = "https://api.jikan.moe/v4"
TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
RAWG_API_BASE_URL = "https://api.rawg.io/api"
DEFAULT_HTTP_TIMEOUT_SECONDS = 20.0


@dataclass(frozen=True)
class Settings:
    tmdb_api_key: str | None = None
    rawg_api_key: str | None = None
    jikan_base_url: str = JIKAN_API_BASE_URL
    tmdb_base_url: str = TMDB_API_BASE_URL
    rawg_base_url: str = RAWG_API_BASE_URL
    tmdb_image_base_url: str = TMDB_IMAGE_BASE_URL
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    cors_allow_origins: tuple[str, ...] = ()


def _clean(value: str | None) -> str | None:
    resolved = (value or "").strip()
    return resolved or None


def _parse_timeout(value: str | None) -> float:
    raw = _clean(value)
    if raw is None:
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError(f"MEDIA_HUB_HTTP_TIMEOUT must be a number of seconds, got {value!r}") from exc
    if timeout <= 0:
        raise ValueError(f"MEDIA_HUB_HTTP_TIMEOUT must be positive, got {value!r}")
    return timeout


def parse_cors_origins(value: str | None) -> tuple[str, ...]:
    """
    Parse a comma-separated origin list.
    Example: CORS_ALLOW_ORIGINS=https://example.com,https://app.example.com
    """
    if not value:
        return ()
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


def find_env_file(search_dirs: Iterable[Path] | None = None) -> Path | None:
    """Return the first `.env` in `search_dirs` (default: repo root, then the working directory)."""
    if search_dirs is None:
        search_dirs = (Path(__file__).resolve().parents[1], Path.cwd())
    for directory in search_dirs:
        path = Path(directory) / ".env"
        if path.is_file():
            return path
    return None


def _merge_env_file(env: Mapping[str, str], env_file: Path | str) -> dict[str, str]:
    # Real environment variables win over `.env` entries.
    merged = {key: value for key, value in dotenv_values(env_file).items() if value is not None}
    merged.update(env)
    return merged


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    env_file: Path | str | None = None,
) -> Settings:
    """
    Build `Settings` from `environ` (default `os.environ`), filling gaps from
    `env_file` when given. The `.env` file is read, not exported into the process.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    if env_file is not None:
        logger.info("Reading settings from %s", env_file)
        env = _merge_env_file(env, env_file)

    settings = Settings(
        tmdb_api_key=_clean(env.get("TMDB_API_KEY")),
        rawg_api_key=_clean(env.get("RAWG_API_KEY")),
        jikan_base_url=(_clean(env.get("JIKAN_BASE_URL")) or JIKAN_API_BASE_URL).rstrip("/"),
        tmdb_base_url=(_clean(env.get("TMDB_BASE_URL")) or TMDB_API_BASE_URL).rstrip("/"),
        rawg_base_url=(_clean(env.get("RAWG_BASE_URL")) or RAWG_API_BASE_URL).rstrip("/"),
        tmdb_image_base_url=_clean(env.get("TMDB_IMAGE_BASE_URL")) or TMDB_IMAGE_BASE_URL,
        http_timeout_seconds=_parse_timeout(env.get("MEDIA_HUB_HTTP_TIMEOUT")),
        cors_allow_origins=parse_cors_origins(env.get("CORS_ALLOW_ORIGINS")),
    )
    if not settings.tmdb_api_key:
        logger.warning("TMDB_API_KEY is not set; movie/series requests will fail")
    if not settings.rawg_api_key:
        logger.warning("RAWG_API_KEY is not set; game requests will fail")
    return settings
