from __future__ import annotations

from typing import List, Optional

from models.search_result import SearchResponse, SearchResult
from services.field_extraction import extract_lead_fields


def filter_results(results: List[SearchResult], filter_text: str = "") -> List[SearchResult]:
    """Case-insensitive substring match on title or snippet."""
    needle = (filter_text or "").lower()
    if not needle:
        return list(results)
    return [r for r in results if needle in r.title.lower() or needle in r.snippet.lower()]


def _clip(text: str, width: int) -> str:
    text = " ".join((text or "").split())
    return text if len(text) <= width else text[: width - 3] + "..."


def print_results(response: Optional[SearchResponse], filter_text: str = "") -> None:
    """Print the results table with the query and match counts."""
    if not response or not response.results:
        print("No results yet. Enter search criteria to find professional contacts.")
        return

    shown = filter_results(response.results, filter_text)

    print("\n" + "="*60)
    print("LINKEDIN LEAD SEARCH - RESULTS")
    print("="*60)
    print(f"Search Query: {response.query}")
    print(f"Found {response.total_results} professional contacts matching your criteria")
    print(f"Showing {len(shown)} of {len(response.results)} results")
    print()
    for idx, result in enumerate(shown, start=1):
        fields = extract_lead_fields(result.title, result.snippet)
        print(f"{idx:>2}. {fields.name}")
        print(f"    Role: {fields.role} | Company: {fields.company}")
        print(f"    {_clip(result.snippet, 100)}")
        print(f"    {result.link}")
    print("="*60)
