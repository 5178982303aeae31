from __future__ import annotations

from typing import Optional


class LeadSearchError(Exception):
    """Base class for every failure surfaced by a search."""


class MissingCredentialError(LeadSearchError):
    def __init__(self, message: str = "SerpAPI key required. Save one with `set-key` before searching.") -> None:
        super().__init__(message)


class SearchRequestError(LeadSearchError):
    """Transport failure: non-success HTTP status, connection error or unreadable body."""

    def __init__(self, status_code: Optional[int], reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            super().__init__(f"Search request failed: {reason}")
        else:
            super().__init__(f"Search request failed: {status_code} {reason}")


class UpstreamSearchError(LeadSearchError):
    """The provider answered successfully but reported an error in the body."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Search provider error: {message}")
