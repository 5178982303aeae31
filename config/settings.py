from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    serpapi_search_url: str
    serpapi_engine: str
    results_per_search: int
    request_timeout_seconds: int

    # Durable key-value store (credential slot) and export target
    store_path: str
    export_dir: str

    log_level: str
    run_env: str

    # Content
    site_filter: str
    profile_url_pattern: str

    # Source selection
    search_source: str = "serpapi_google"
    demo: bool = False
    demo_delay_seconds: float = 2.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    demo = _as_bool(os.getenv("DEMO"))
    search_source = os.getenv("SEARCH_SOURCE") or ("demo_profiles" if demo else "serpapi_google")
    return Settings(
        serpapi_search_url=os.getenv("SERPAPI_SEARCH_URL", "https://serpapi.com/search"),
        serpapi_engine=os.getenv("SERPAPI_ENGINE", "google"),
        results_per_search=int(os.getenv("RESULTS_PER_SEARCH", "20")),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        store_path=os.getenv("STORE_PATH", "leadgen.db"),
        export_dir=os.getenv("EXPORT_DIR", "."),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        site_filter="linkedin.com/in/",
        profile_url_pattern="linkedin.com/in/",
        search_source=search_source,
        demo=demo,
        demo_delay_seconds=float(os.getenv("DEMO_DELAY", "2")),
    )
