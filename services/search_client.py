"""
LinkedIn profile search on top of a pluggable result source (SerpAPI by default).
"""
from __future__ import annotations

import itertools
import logging
import time
from typing import Any, Callable, Dict, List, Optional

from config.settings import Settings, get_settings
from models.search_params import SearchParams
from models.search_result import SearchResponse, SearchResult
from ports.source import SearchSourcePort
from services.credentials import CredentialManager
from services.errors import MissingCredentialError, UpstreamSearchError
from services.query_builder import build_linkedin_query


NO_TITLE = "No title"
NO_SNIPPET = "No description available"


def normalize_results(
    data: Dict[str, Any],
    profile_url_pattern: str,
    make_id: Callable[[], str],
) -> List[SearchResult]:
    """Keep LinkedIn profile hits from a raw provider payload, with placeholder defaults."""
    items = data.get("organic_results") or []
    if not isinstance(items, list):
        return []
    results: List[SearchResult] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        link = item.get("link")
        if not isinstance(link, str) or profile_url_pattern not in link:
            continue
        title = item.get("title")
        snippet = item.get("snippet")
        results.append(
            SearchResult(
                id=make_id(),
                title=title if isinstance(title, str) and title else NO_TITLE,
                link=link,
                snippet=snippet if isinstance(snippet, str) and snippet else NO_SNIPPET,
            )
        )
    return results


def _reported_total(data: Dict[str, Any]) -> Optional[int]:
    info = data.get("search_information") or {}
    total = info.get("total_results") if isinstance(info, dict) else None
    if total is None:
        return None
    try:
        return int(total)
    except (TypeError, ValueError):
        return None


def search_with_key(
    api_key: str,
    params: SearchParams,
    source: SearchSourcePort,
    settings: Settings,
    make_id: Callable[[], str],
) -> SearchResponse:
    """Run one search for an explicit key; holds no state of its own."""
    query = build_linkedin_query(params, site=settings.site_filter)
    logging.info(f"Starting search with query: {query}", extra=dict(step="search", source=source.source_name))

    t0 = time.time()
    data = source.fetch(query, api_key, settings.results_per_search)
    duration_ms = int((time.time() - t0) * 1000)

    # Presence of the key signals failure, even when the message is empty
    if "error" in data and data["error"] is not None:
        logging.error(
            f"Search provider reported an error: {data['error']}",
            extra=dict(step="search", status="upstream_error", duration_ms=duration_ms, source=source.source_name),
        )
        raise UpstreamSearchError(str(data["error"]))

    results = normalize_results(data, settings.profile_url_pattern, make_id)
    raw_items = data.get("organic_results")
    raw_count = len(raw_items) if isinstance(raw_items, list) else 0
    total = _reported_total(data)
    logging.info(
        f"Search completed. Kept {len(results)} of {raw_count} results",
        extra=dict(step="search", status="ok", duration_ms=duration_ms, source=source.source_name, results=len(results)),
    )
    return SearchResponse(
        results=results,
        total_results=total if total is not None else len(results),
        query=query,
    )


class SearchClient:
    """Binds credential storage and a result source to `search_with_key`."""

    def __init__(
        self,
        credentials: CredentialManager,
        source: Optional[SearchSourcePort] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.credentials = credentials
        if source is None:
            import sources  # noqa: F401 ensure registration
            from sources.registry import get_source
            source = get_source(self.settings.search_source)
        self.source = source
        self._ids = itertools.count(1)

    def _next_id(self) -> str:
        return f"{int(time.time() * 1000)}-{next(self._ids)}"

    def set_credential(self, key: str) -> None:
        self.credentials.set_credential(key)

    def get_credential(self) -> Optional[str]:
        return self.credentials.get_credential()

    def search(self, params: SearchParams) -> SearchResponse:
        api_key = self.credentials.get_credential()
        if not api_key:
            logging.warning("Search attempted without an API key", extra=dict(step="search", status="no_credential"))
            raise MissingCredentialError()
        return search_with_key(api_key, params, self.source, self.settings, self._next_id)
