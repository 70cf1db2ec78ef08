"""
Errors raised by the aggregator and mapped to HTTP responses in `api/main.py`.
"""
from __future__ import annotations


class MediaHubError(Exception):
    """Base error carrying a client-safe message and an HTTP status code."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(MediaHubError):
    status_code = 400
    default_message = "Query parameter is required"


class InvalidType(MediaHubError):
    status_code = 400
    default_message = "Invalid type"


class UpstreamError(MediaHubError):
    """
    A provider call failed (HTTP error, timeout, malformed payload).

    `provider` and `cause` are kept for logging only; the message exposed to
    clients is always the generic default.
    """

    status_code = 500
    default_message = "External API Error"

    def __init__(self, *, provider: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__()
        self.provider = provider
        self.cause = cause
