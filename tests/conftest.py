from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import requests

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def load_fixture(provider: str, name: str) -> dict[str, Any]:
    return json.loads((FIXTURES_DIR / provider / name).read_text(encoding="utf-8"))


class FakeResponse:
    def __init__(self, *, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records every GET and replays queued responses (or raises queued exceptions)."""

    def __init__(self, *responses: FakeResponse | Exception) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, *responses: FakeResponse | Exception) -> None:
        self._responses.extend(responses)

    def get(self, url: str, *, params=None, headers=None, timeout=None) -> FakeResponse:
        self.calls.append(
            {
                "url": url,
                "params": dict(params or {}),
                "headers": dict(headers or {}),
                "timeout": timeout,
            }
        )
        if not self._responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fixture_payload():
    return load_fixture


@pytest.fixture
def make_session():
    def _make(*responses: FakeResponse | Exception) -> FakeSession:
        return FakeSession(*responses)

    return _make


@pytest.fixture
def timeout_error() -> Exception:
    return requests.Timeout("read timed out")


@pytest.fixture
def fake_response():
    return FakeResponse
