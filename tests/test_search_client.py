from __future__ import annotations

import pytest
import requests

from config.settings import get_settings
from models.search_params import SearchParams
from services.credentials import CredentialManager
from services.errors import MissingCredentialError, SearchRequestError, UpstreamSearchError
from services.search_client import NO_SNIPPET, NO_TITLE, SearchClient
from sources.serpapi_google import SerpApiGoogleSource

from tests.fakes import FakeResponse, FakeSession, MemoryStore


def _client(payload=None, status_code=200, reason="OK", key="secret-key"):
    settings = get_settings()
    session = FakeSession(FakeResponse(status_code=status_code, payload=payload, reason=reason))
    store = MemoryStore({"serpapi_key": key} if key else {})
    source = SerpApiGoogleSource(settings=settings, session=session)  # type: ignore[arg-type]
    client = SearchClient(CredentialManager(store), source=source, settings=settings)
    return client, session


def test_missing_credential_makes_no_network_call():
    client, session = _client(key=None)
    with pytest.raises(MissingCredentialError):
        client.search(SearchParams(role="Founder"))
    assert session.calls == []


def test_request_carries_query_key_and_result_count():
    client, session = _client(payload={"organic_results": []})
    response = client.search(SearchParams(role="Founder", location="Bangalore, India"))

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == "https://serpapi.com/search"
    assert call["params"] == {
        "engine": "google",
        "q": 'site:linkedin.com/in/ "Founder" "Bangalore, India"',
        "api_key": "secret-key",
        "num": 20,
    }
    assert response.query == call["params"]["q"]


def test_only_linkedin_profile_links_are_kept():
    payload = {
        "organic_results": [
            {"link": "https://linkedin.com/in/x", "title": "X - CEO | X Corp", "snippet": "at X Corp."},
            {"link": "https://example.com/x", "title": "Other", "snippet": "nope"},
            {"title": "No link at all"},
        ]
    }
    client, _ = _client(payload=payload)
    response = client.search(SearchParams())

    assert [r.link for r in response.results] == ["https://linkedin.com/in/x"]
    # No provider total: falls back to the kept count
    assert response.total_results == 1


def test_placeholders_for_missing_title_and_snippet():
    client, _ = _client(payload={"organic_results": [{"link": "https://www.linkedin.com/in/anon"}]})
    result = client.search(SearchParams()).results[0]
    assert result.title == NO_TITLE
    assert result.snippet == NO_SNIPPET
    assert result.link == "https://www.linkedin.com/in/anon"


def test_provider_total_is_reported_even_after_filtering():
    payload = {
        "organic_results": [{"link": "https://linkedin.com/in/a", "title": "A", "snippet": "a"}],
        "search_information": {"total_results": 1340},
    }
    client, _ = _client(payload=payload)
    response = client.search(SearchParams())
    assert response.total_results == 1340
    assert len(response.results) == 1


def test_absent_organic_results_is_empty():
    client, _ = _client(payload={"search_information": {}})
    response = client.search(SearchParams())
    assert response.results == []
    assert response.total_results == 0


def test_result_ids_are_unique_across_searches():
    payload = {"organic_results": [
        {"link": "https://linkedin.com/in/a"},
        {"link": "https://linkedin.com/in/b"},
    ]}
    client, _ = _client(payload=payload)
    ids = [r.id for _ in range(3) for r in client.search(SearchParams()).results]
    assert len(set(ids)) == len(ids) == 6


def test_http_error_status_raises_request_error():
    client, _ = _client(status_code=401, reason="Unauthorized")
    with pytest.raises(SearchRequestError) as exc:
        client.search(SearchParams())
    assert exc.value.status_code == 401
    assert "401 Unauthorized" in str(exc.value)


def test_error_field_in_success_body_raises_upstream_error():
    client, _ = _client(payload={"error": "Invalid API key."})
    with pytest.raises(UpstreamSearchError) as exc:
        client.search(SearchParams())
    assert exc.value.message == "Invalid API key."


def test_empty_error_field_still_raises_upstream_error():
    client, _ = _client(payload={"error": "", "organic_results": []})
    with pytest.raises(UpstreamSearchError) as exc:
        client.search(SearchParams())
    assert exc.value.message == ""


def test_non_string_link_is_skipped():
    client, _ = _client(payload={"organic_results": [
        {"link": 7, "title": "Numeric link"},
        {"link": ["https://www.linkedin.com/in/listed"]},
        {"link": "https://www.linkedin.com/in/kept", "title": "Kept"},
    ]})
    response = client.search(SearchParams())
    assert [r.title for r in response.results] == ["Kept"]


def test_non_string_title_and_snippet_fall_back_to_placeholders():
    client, _ = _client(payload={"organic_results": [
        {"link": "https://www.linkedin.com/in/odd", "title": 42, "snippet": {"text": "x"}},
    ]})
    (result,) = client.search(SearchParams()).results
    assert result.title == NO_TITLE
    assert result.snippet == NO_SNIPPET


def test_unreadable_body_raises_request_error():
    client, _ = _client(payload=ValueError("not json"))
    with pytest.raises(SearchRequestError):
        client.search(SearchParams())


def test_connection_error_raises_request_error():
    class _BrokenSession:
        def get(self, *args, **kwargs):
            raise requests.exceptions.ConnectionError("connection refused")

    settings = get_settings()
    source = SerpApiGoogleSource(settings=settings, session=_BrokenSession())  # type: ignore[arg-type]
    client = SearchClient(CredentialManager(MemoryStore({"serpapi_key": "k"})), source=source, settings=settings)
    with pytest.raises(SearchRequestError) as exc:
        client.search(SearchParams())
    assert exc.value.status_code is None
