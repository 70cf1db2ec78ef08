"""
Domain models shared across the API and scripts.
"""

from media_hub.models.media import MediaType, UnifiedResult

__all__ = [
    "MediaType",
    "UnifiedResult",
]
