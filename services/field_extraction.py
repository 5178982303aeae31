"""
Regex heuristics deriving name, role and company from a search hit.

Shared by the results table and the CSV export so both always agree.
"""
from __future__ import annotations

import re

from models.lead_fields import LeadFields


NOT_SPECIFIED = "Not specified"

_NAME_RE = re.compile(r"^([^-|]+)")
# Hyphen or en dash separator, up to the first pipe
_ROLE_RE = re.compile(r"(?:-|–)\s*([^|]+)")
_COMPANY_AT_RE = re.compile(r"\bat\s+([^.]+)", re.IGNORECASE)
_COMPANY_SUFFIX_RE = re.compile(
    r"\b([A-Z][a-zA-Z\s&]+(?:Inc|LLC|Corp|Ltd|Company|Group|Solutions|Technologies|Services))\b"
)


def extract_name(title: str) -> str:
    match = _NAME_RE.match(title or "")
    return match.group(1).strip() if match else (title or "")


def extract_role(title: str) -> str:
    match = _ROLE_RE.search(title or "")
    return match.group(1).strip() if match else NOT_SPECIFIED


def extract_company(snippet: str) -> str:
    text = snippet or ""
    match = _COMPANY_AT_RE.search(text) or _COMPANY_SUFFIX_RE.search(text)
    return match.group(1).strip() if match else NOT_SPECIFIED


def extract_lead_fields(title: str, snippet: str) -> LeadFields:
    return LeadFields(
        name=extract_name(title),
        role=extract_role(title),
        company=extract_company(snippet),
    )
