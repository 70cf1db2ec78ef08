from __future__ import annotations

import pytest

from media_hub.integrations.http import ProviderClientError, request_json, require_list


def test_request_json_returns_object_and_sends_accept_header(make_session, fake_response) -> None:
    session = make_session(fake_response(payload={"data": []}))

    payload = request_json(session, "https://example.test/x", provider="jikan", params={"q": "a"}, timeout_seconds=3.0)

    assert payload == {"data": []}
    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["params"] == {"q": "a"}
    assert call["headers"]["accept"] == "application/json"
    assert call["timeout"] == 3.0


def test_request_json_merges_extra_headers(make_session, fake_response) -> None:
    session = make_session(fake_response(payload={}))

    request_json(session, "https://example.test/x", provider="tmdb", headers={"Authorization": "Bearer a.b"})

    assert session.calls[0]["headers"]["Authorization"] == "Bearer a.b"


def test_request_json_wraps_transport_errors(make_session, timeout_error) -> None:
    session = make_session(timeout_error)

    with pytest.raises(ProviderClientError) as excinfo:
        request_json(session, "https://example.test/x", provider="rawg")

    assert excinfo.value.provider == "rawg"
    assert excinfo.value.status_code is None
    assert len(session.calls) == 1


def test_request_json_does_not_retry_on_server_error(make_session, fake_response) -> None:
    session = make_session(fake_response(status_code=503, payload=None, text="upstream down" * 100))

    with pytest.raises(ProviderClientError) as excinfo:
        request_json(session, "https://example.test/x", provider="jikan")

    assert excinfo.value.status_code == 503
    assert len(excinfo.value.body_snippet) == 400
    assert len(session.calls) == 1


def test_request_json_rejects_non_json(make_session, fake_response) -> None:
    session = make_session(fake_response(payload=None, text="<html>oops</html>"))

    with pytest.raises(ProviderClientError, match="non-JSON"):
        request_json(session, "https://example.test/x", provider="tmdb")


def test_request_json_rejects_non_object(make_session, fake_response) -> None:
    session = make_session(fake_response(payload=[1, 2, 3]))

    with pytest.raises(ProviderClientError, match="not an object"):
        request_json(session, "https://example.test/x", provider="tmdb")


def test_require_list_rejects_missing_key() -> None:
    assert require_list({"results": [1]}, "results", provider="rawg") == [1]
    with pytest.raises(ProviderClientError):
        require_list({"results": None}, "results", provider="rawg")
    with pytest.raises(ProviderClientError):
        require_list({}, "data", provider="jikan")
