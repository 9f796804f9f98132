from __future__ import annotations

from learngraph.adapters.cache import InMemoryCache
from learngraph.adapters.nodes import InMemoryNodeStore
from learngraph.app import build_pipeline, source_catalog
from learngraph.config.catalog import CatalogConfig
from learngraph.domain.model import NodeType
from tests.support.catalog import FakeCatalogFetcher


def test_build_pipeline_uses_locale_qualified_key(fetcher: FakeCatalogFetcher) -> None:
    config = CatalogConfig(locale="de-de", namespace="learn", cache_response=True)

    pipeline = build_pipeline(
        config=config,
        cache=InMemoryCache(),
        store=InMemoryNodeStore(),
        fetcher=fetcher,
    )

    assert pipeline.gateway.key == "learn-de-de"
    assert pipeline.options.cache_response is True
    assert pipeline.options.force_clear is False


def test_source_catalog_declares_schema_and_creates_nodes(fetcher: FakeCatalogFetcher) -> None:
    cache = InMemoryCache()
    store = InMemoryNodeStore()

    result = source_catalog(config=CatalogConfig(), cache=cache, store=store, fetcher=fetcher)

    assert result.succeeded
    assert set(store.declarations) == set(NodeType)
    assert store.counts()[NodeType.COURSE] == 1
    assert cache.entries["mslearn-catalog-data-en-us"] == fetcher.document


def test_source_catalog_with_cache_response_skips_second_fetch(
    fetcher: FakeCatalogFetcher,
) -> None:
    cache = InMemoryCache()
    config = CatalogConfig(cache_response=True)

    source_catalog(config=config, cache=cache, store=InMemoryNodeStore(), fetcher=fetcher)
    second = source_catalog(config=config, cache=cache, store=InMemoryNodeStore(), fetcher=fetcher)

    assert fetcher.calls == 1
    assert second.from_cache is True


def test_source_catalog_defaults_to_persisted_cache(fetcher: FakeCatalogFetcher) -> None:
    result = source_catalog(config=CatalogConfig(), store=InMemoryNodeStore(), fetcher=fetcher)

    assert result.succeeded
    assert fetcher.calls == 1


def test_source_catalog_fills_the_callers_empty_store(
    fetcher: FakeCatalogFetcher,
    catalog_document: dict[str, list[dict[str, object]]],
) -> None:
    store = InMemoryNodeStore()
    assert len(store) == 0

    result = source_catalog(
        config=CatalogConfig(), cache=InMemoryCache(), store=store, fetcher=fetcher
    )

    assert result.created == sum(len(records) for records in catalog_document.values())
    assert len(store) == result.created
    assert len(store.declarations) == len(NodeType)
