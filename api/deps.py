"""
Dependency injection for settings and the media aggregator.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from media_hub.aggregator import MediaAggregator
from media_hub.config import Settings, find_env_file, load_settings


@lru_cache
def get_settings() -> Settings:
    """
    Read settings from the environment and `.env` (if present) once per process.
    """
    return load_settings(env_file=find_env_file())


@lru_cache
def get_aggregator() -> MediaAggregator:
    """
    Returns the process-wide aggregator. It holds only read-only settings and no
    HTTP session, so each provider call opens its own and threads share nothing.
    """
    return MediaAggregator(get_settings())


# Type aliases for dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
Aggregator = Annotated[MediaAggregator, Depends(get_aggregator)]
