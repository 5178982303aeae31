from .search_params import SearchParams
from .search_result import SearchResult, SearchResponse
from .lead_fields import LeadFields
from .export_row import ExportRow, EXPORT_COLUMNS

__all__ = [
    "SearchParams",
    "SearchResult",
    "SearchResponse",
    "LeadFields",
    "ExportRow",
    "EXPORT_COLUMNS",
]
