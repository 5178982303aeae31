from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LeadFields(BaseModel):
    """Display fields derived from a result's title and snippet."""

    name: str
    role: str
    company: str

    model_config = ConfigDict(frozen=True)
