from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExportRow(BaseModel):
    """One CSV row; aliases are the column headers of the export file."""

    name: str = Field(alias="Name")
    title: str = Field(alias="Title")
    company: str = Field(alias="Company")
    linkedin_url: str = Field(alias="LinkedIn_URL")
    profile_summary: str = Field(alias="Profile_Summary")
    search_query: str = Field(alias="Search_Query")
    export_date: str = Field(alias="Export_Date")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


EXPORT_COLUMNS: list[str] = [
    field.alias or name for name, field in ExportRow.model_fields.items()
]
