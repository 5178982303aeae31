from __future__ import annotations

from typing import Any, Dict, Protocol


class SearchSourcePort(Protocol):
    source_name: str

    def fetch(self, query: str, api_key: str, num: int) -> Dict[str, Any]:
        """Return one page of raw provider JSON for the query."""
        ...
