from __future__ import annotations

import logging
import threading
from datetime import date
from pathlib import Path
from typing import List, Optional

from models.search_params import SearchParams
from models.search_result import SearchResponse, SearchResult
from services.export import write_export
from services.reporting import filter_results
from services.search_client import SearchClient


class SearchSession:
    """Result state for one operator session.

    Every search takes a ticket; a response is applied only if its ticket is
    still the latest issued, so a slow earlier search can never overwrite a
    newer one. A failed search leaves the current results untouched.
    """

    def __init__(self, client: SearchClient):
        self.client = client
        self._lock = threading.Lock()
        self._latest_ticket = 0
        self.response: Optional[SearchResponse] = None

    @property
    def results(self) -> List[SearchResult]:
        return list(self.response.results) if self.response else []

    @property
    def query(self) -> str:
        return self.response.query if self.response else ""

    @property
    def total_results(self) -> int:
        return self.response.total_results if self.response else 0

    def search(self, params: SearchParams) -> Optional[SearchResponse]:
        """Run a search; returns None when a newer search superseded this one."""
        with self._lock:
            self._latest_ticket += 1
            ticket = self._latest_ticket

        response = self.client.search(params)

        with self._lock:
            if ticket != self._latest_ticket:
                logging.info(
                    f"Discarding stale search response (ticket {ticket}, latest {self._latest_ticket})",
                    extra={"step": "search", "status": "stale"},
                )
                return None
            self.response = response
        return response

    def filtered_results(self, filter_text: str = "") -> List[SearchResult]:
        return filter_results(self.results, filter_text)

    def export(self, out_dir: str | Path, export_date: Optional[date] = None) -> Optional[Path]:
        return write_export(self.results, self.query, out_dir, export_date=export_date)
