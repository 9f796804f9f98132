from __future__ import annotations

import pytest

from learngraph.config.catalog import (
    DEFAULT_CACHE_NAMESPACE,
    DEFAULT_CATALOG_URL,
    DEFAULT_LOCALE,
    get_catalog_config,
)

_ENV_VARS = (
    "LEARNGRAPH_CATALOG_URL",
    "LEARNGRAPH_LOCALE",
    "LEARNGRAPH_CACHE_NAMESPACE",
    "LEARNGRAPH_CACHE_RESPONSE",
    "LEARNGRAPH_FORCE_CLEAR_CACHE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = get_catalog_config()

    assert config.endpoint_url == DEFAULT_CATALOG_URL
    assert config.locale == DEFAULT_LOCALE
    assert config.namespace == DEFAULT_CACHE_NAMESPACE
    assert config.cache_response is False
    assert config.force_clear is False
    assert config.http.timeout_seconds == 60.0
    assert config.http.default_headers == {"Accept": "application/json"}


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEARNGRAPH_CATALOG_URL", "https://mirror.example.com/catalog")
    monkeypatch.setenv("LEARNGRAPH_LOCALE", "fr-fr")
    monkeypatch.setenv("LEARNGRAPH_CACHE_NAMESPACE", "mirror")
    monkeypatch.setenv("LEARNGRAPH_CACHE_RESPONSE", "true")
    monkeypatch.setenv("LEARNGRAPH_FORCE_CLEAR_CACHE", "1")

    config = get_catalog_config()

    assert config.endpoint_url == "https://mirror.example.com/catalog"
    assert config.locale == "fr-fr"
    assert config.namespace == "mirror"
    assert config.cache_response is True
    assert config.force_clear is True


def test_arguments_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEARNGRAPH_CACHE_RESPONSE", "true")
    monkeypatch.setenv("LEARNGRAPH_LOCALE", "fr-fr")

    config = get_catalog_config(cache_response=False, locale="ja-jp")

    assert config.cache_response is False
    assert config.locale == "ja-jp"
