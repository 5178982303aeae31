from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SearchParams(BaseModel):
    """Search criteria as entered by the operator; frozen once submitted."""

    # Free-text note for the operator; never part of the generated query
    natural_language_query: str = ""
    role: str = ""
    industry: str = ""
    location: str = ""
    company_size: str = ""
    additional_criteria: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")
