from __future__ import annotations

import pytest


def test_builtin_sources_registered():
    # Import package to trigger registration
    import sources  # noqa: F401
    from sources.registry import available_sources, get_source

    names = available_sources().keys()
    assert "serpapi_google" in names
    assert "demo_profiles" in names

    src = get_source("demo_profiles")
    assert getattr(src, "source_name", None) == "demo_profiles"


def test_unknown_source_raises():
    from sources.registry import get_source
    with pytest.raises(KeyError):
        get_source("does_not_exist")


def test_demo_mode_selects_demo_source(monkeypatch):
    monkeypatch.setenv("DEMO", "true")
    monkeypatch.delenv("SEARCH_SOURCE", raising=False)
    from config.settings import get_settings
    get_settings.cache_clear()
    assert get_settings().search_source == "demo_profiles"


def test_demo_source_returns_profiles_in_provider_shape(monkeypatch):
    monkeypatch.setenv("DEMO_DELAY", "0")
    from sources.demo_profiles import DemoProfilesSource
    data = DemoProfilesSource().fetch('site:linkedin.com/in/ "Founder"', "key", 20)
    items = data["organic_results"]
    assert len(items) == 8
    assert all("linkedin.com/in/" in item["link"] for item in items)
