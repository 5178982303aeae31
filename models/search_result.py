from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """One LinkedIn profile hit; id is request-local and never persisted."""

    id: str
    title: str
    link: str
    snippet: str

    model_config = ConfigDict(extra="ignore")


class SearchResponse(BaseModel):
    results: list[SearchResult] = Field(default_factory=list)
    total_results: int = 0
    query: str = ""

    model_config = ConfigDict(extra="ignore")
