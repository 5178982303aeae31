import argparse
import logging
import os
import sys
import uuid as _uuid

from config.settings import get_settings
from db.connection import get_connection
from db import schema
from db.repos.kv_repo import KeyValueRepo
from models.search_params import SearchParams
from services.credentials import CredentialManager, mask_credential
from services.errors import LeadSearchError
from services.query_builder import build_linkedin_query
from services.reporting import print_results
from services.search_client import SearchClient
from services.search_session import SearchSession
from utils.logging_setup import init_logging


def _credentials(args) -> CredentialManager:
    conn = get_connection(args.store)
    schema.bootstrap(conn)
    return CredentialManager(KeyValueRepo(conn))


EXAMPLE_CRITERIA = dict(
    query="Find founders in staffing/recruitment firms from Bangalore with 50-100 employees who are actively seeking to scale their businesses",
    role="Founder",
    industry="Staffing/Recruitment",
    location="Bangalore, India",
    company_size="50-100 employees",
    criteria="actively seeking to scale",
)


def _params_from_args(args) -> SearchParams:
    defaults = EXAMPLE_CRITERIA if getattr(args, "example", False) else {}

    def pick(name):
        value = getattr(args, name, None)
        return value if value is not None else defaults.get(name, "")

    return SearchParams(
        natural_language_query=pick("query"),
        role=pick("role"),
        industry=pick("industry"),
        location=pick("location"),
        company_size=pick("company_size"),
        additional_criteria=pick("criteria"),
    )


def cmd_set_key(args):
    key = (args.key or "").strip()
    if not key:
        print("Please enter your SerpAPI key")
        sys.exit(1)
    _credentials(args).set_credential(key)
    print("API key saved")


def cmd_show_key(args):
    key = _credentials(args).get_credential()
    if not key:
        print("No API key stored. Get one at https://serpapi.com/ and run `set-key`.")
        return
    print(f"API key: {mask_credential(key)}")


def cmd_query(args):
    params = _params_from_args(args)
    print(build_linkedin_query(params, site=get_settings().site_filter))


def cmd_search(args):
    params = _params_from_args(args)
    if params.natural_language_query:
        logging.info(f"Operator note: {params.natural_language_query}")

    session = SearchSession(SearchClient(_credentials(args)))
    try:
        session.search(params)
    except LeadSearchError as e:
        logging.error(f"Search failed: {e}")
        print(f"Search failed: {e}")
        sys.exit(1)

    print_results(session.response, args.filter or "")

    if args.export:
        path = session.export(args.export_dir)
        if path is None:
            print("No data to export. Please perform a search first.")
        else:
            print(f"Results exported to {path}")


def _add_criteria_flags(p):
    p.add_argument("--query", "-q", type=str, help="Natural-language description of the leads (kept for reference, not sent)")
    p.add_argument("--role", "-r", type=str, help='Role/title, e.g. "Founder"')
    p.add_argument("--industry", "-i", type=str, help='Industry, e.g. "Staffing/Recruitment"')
    p.add_argument("--location", "-l", type=str, help='Location, e.g. "Bangalore, India"')
    p.add_argument("--company-size", "-c", type=str, help='Company size bucket, e.g. "50-100 employees"')
    p.add_argument("--criteria", "-a", type=str, help='Additional criteria, e.g. "actively seeking to scale"')
    p.add_argument("--example", action="store_true", help="Pre-fill unset criteria with the sample Bangalore staffing-founder search")


def main():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="LinkedIn lead search CLI")
    parser.add_argument("--store", default=settings.store_path, help="Path to the local key store (default from settings)")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=settings.log_level, help="Set logging level (default: from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_key = sub.add_parser("set-key", help="Save the SerpAPI key to the local store")
    p_key.add_argument("--key", "-k", required=True, help="SerpAPI key")
    p_key.set_defaults(func=cmd_set_key)

    p_show = sub.add_parser("show-key", help="Show the stored SerpAPI key (masked)")
    p_show.set_defaults(func=cmd_show_key)

    p_q = sub.add_parser("query", help="Print the generated search query without searching")
    _add_criteria_flags(p_q)
    p_q.set_defaults(func=cmd_query)

    p_s = sub.add_parser("search", help="Search LinkedIn profiles and print the results")
    _add_criteria_flags(p_s)
    p_s.add_argument("--filter", "-f", type=str, help="Only show results whose title or snippet contains this text")
    p_s.add_argument("--export", "-e", action="store_true", help="Export all results to linkedin_leads_<date>.csv")
    p_s.add_argument("--export-dir", default=settings.export_dir, help="Directory for the export file (default from settings)")
    p_s.set_defaults(func=cmd_search)

    args = parser.parse_args()
    init_logging(args.log_level)
    # Ensure a RUN_ID for this process to correlate logs
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex
    args.func(args)


if __name__ == "__main__":
    main()
