from __future__ import annotations

from typing import Callable, Dict, List

from ports.source import SearchSourcePort


SourceFactory = Callable[[], SearchSourcePort]

_SOURCES: Dict[str, SourceFactory] = {}


def register(name: str, factory: SourceFactory) -> None:
    """Register a search source under a name; re-registering replaces it."""
    _SOURCES[name] = factory


def get_source(name: str) -> SearchSourcePort:
    try:
        factory = _SOURCES[name]
    except KeyError:
        known = ", ".join(source_names()) or "none"
        raise KeyError(f"Unknown search source: {name} (available: {known})") from None
    return factory()


def source_names() -> List[str]:
    return sorted(_SOURCES)


def available_sources() -> Dict[str, SourceFactory]:
    return dict(_SOURCES)
