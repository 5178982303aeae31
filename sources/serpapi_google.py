"""
SerpAPI Google engine integration for LinkedIn profile searches.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from config.settings import Settings, get_settings
from services.errors import SearchRequestError
from sources.registry import register


class SerpApiGoogleSource:
    """Issues a single GET per search; no retries and no pagination."""

    source_name = "serpapi_google"

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        # Reuse one session for connection pooling across searches
        self.session = session or requests.Session()
        self.api_calls_made = 0

    def fetch(self, query: str, api_key: str, num: int) -> Dict[str, Any]:
        params = {
            "engine": self.settings.serpapi_engine,
            "q": query,
            "api_key": api_key,
            "num": num,
        }
        try:
            response = self.session.get(
                self.settings.serpapi_search_url,
                params=params,
                timeout=self.settings.request_timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            logging.error(f"Search request error: {e}", extra={"source": self.source_name, "status": "error"})
            raise SearchRequestError(None, str(e)) from e
        self.api_calls_made += 1

        if not response.ok:
            logging.error(
                f"Search request failed with status {response.status_code}: {response.reason}",
                extra={"source": self.source_name, "status": "http_error"},
            )
            raise SearchRequestError(response.status_code, response.reason or "")

        try:
            data = response.json()
        except ValueError as e:
            raise SearchRequestError(response.status_code, "Response body is not valid JSON") from e
        return data if isinstance(data, dict) else {}


def _register():
    register(SerpApiGoogleSource.source_name, SerpApiGoogleSource)


_register()
