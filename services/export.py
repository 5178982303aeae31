"""
CSV export of search results.

Header row is written as-is; every value cell is double-quoted with embedded
quotes doubled. Rows are joined with a bare newline and there is no trailing
newline, so an empty result list exports as an empty string.
"""
from __future__ import annotations

import csv
import io
import logging
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

from models.export_row import EXPORT_COLUMNS, ExportRow
from models.search_result import SearchResult
from services.field_extraction import extract_lead_fields


EXPORT_PREFIX = "linkedin_leads_"


def build_export_rows(
    results: Iterable[SearchResult],
    search_query: str,
    export_date: Optional[date] = None,
) -> List[ExportRow]:
    stamp = (export_date or date.today()).isoformat()
    rows: List[ExportRow] = []
    for result in results:
        fields = extract_lead_fields(result.title, result.snippet)
        rows.append(ExportRow(
            name=fields.name,
            title=fields.role,
            company=fields.company,
            linkedin_url=result.link,
            profile_summary=result.snippet,
            search_query=search_query,
            export_date=stamp,
        ))
    return rows


def to_csv(rows: List[ExportRow]) -> str:
    if not rows:
        return ""
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(EXPORT_COLUMNS)
    values = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        record = row.model_dump(by_alias=True)
        values.writerow([record[col] or "" for col in EXPORT_COLUMNS])
    return buf.getvalue()[:-1]


def export_filename(export_date: Optional[date] = None) -> str:
    return f"{EXPORT_PREFIX}{(export_date or date.today()).isoformat()}.csv"


def write_export(
    results: List[SearchResult],
    search_query: str,
    out_dir: str | Path,
    export_date: Optional[date] = None,
) -> Optional[Path]:
    """Write the export file and return its path; None when there is nothing to export."""
    if not results:
        logging.warning("No data to export", extra={"step": "export", "status": "empty"})
        return None
    export_date = export_date or date.today()
    content = to_csv(build_export_rows(results, search_query, export_date))
    out_path = Path(out_dir) / export_filename(export_date)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content, encoding="utf-8")
    logging.info(f"Exported {len(results)} results to {out_path}", extra={"step": "export", "status": "ok", "results": len(results)})
    return out_path
