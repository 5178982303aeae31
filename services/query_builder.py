from __future__ import annotations

from typing import List

from models.search_params import SearchParams


# Fixed order of the quoted parts; natural_language_query is deliberately absent
QUERY_FIELDS: List[str] = [
    "role",
    "industry",
    "location",
    "company_size",
    "additional_criteria",
]


def _quote_term(value: str) -> str:
    # Each term must stay a single quoted phrase
    return value.replace('"', "").strip()


def build_linkedin_query(params: SearchParams, site: str = "linkedin.com/in/") -> str:
    """Build `site:<site> "<role>" "<industry>" ...` from the non-empty fields."""
    parts: List[str] = []
    for field in QUERY_FIELDS:
        term = _quote_term(getattr(params, field) or "")
        if term:
            parts.append(f'"{term}"')
    return f"site:{site} {' '.join(parts)}"
