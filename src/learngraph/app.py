"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from learngraph.adapters.cache import SqlAlchemyCache
from learngraph.adapters.catalog import CatalogClient
from learngraph.adapters.nodes import InMemoryNodeStore
from learngraph.config.catalog import get_catalog_config
from learngraph.domain.cache import CacheGateway, build_cache_key
from learngraph.domain.pipeline import CatalogSourcingPipeline, SourcingResult
from learngraph.domain.refresh import RefreshOptions

if TYPE_CHECKING:
    from learngraph.config.catalog import CatalogConfig
    from learngraph.domain.ports import CatalogFetcher, KeyValueCache, NodeStore

log = getLogger(__name__)


def build_pipeline(
    *,
    config: CatalogConfig,
    cache: KeyValueCache,
    store: NodeStore,
    fetcher: CatalogFetcher | None = None,
) -> CatalogSourcingPipeline:
    """Assemble a sourcing pipeline from configuration and adapters."""

    return CatalogSourcingPipeline(
        gateway=CacheGateway(cache=cache, key=build_cache_key(config.namespace, config.locale)),
        fetcher=fetcher if fetcher is not None else CatalogClient(config=config),
        store=store,
        options=RefreshOptions(
            cache_response=config.cache_response,
            force_clear=config.force_clear,
        ),
    )


async def source_catalog_async(
    *,
    config: CatalogConfig | None = None,
    cache: KeyValueCache | None = None,
    store: NodeStore | None = None,
    fetcher: CatalogFetcher | None = None,
) -> SourcingResult:
    """Declare the catalog schema, then source nodes into ``store``."""

    effective_config = config if config is not None else get_catalog_config()
    effective_cache = cache if cache is not None else SqlAlchemyCache.from_uri()
    effective_store = store if store is not None else InMemoryNodeStore()
    pipeline = build_pipeline(
        config=effective_config,
        cache=effective_cache,
        store=effective_store,
        fetcher=fetcher,
    )
    log.info(
        "Starting catalog sourcing: locale=%s, cache_response=%s, force_clear=%s",
        effective_config.locale,
        effective_config.cache_response,
        effective_config.force_clear,
    )

    pipeline.create_schema_customization()
    result = await pipeline.source_nodes()

    log.info(
        "Finished catalog sourcing: created=%s, from_cache=%s, succeeded=%s",
        result.created,
        result.from_cache,
        result.succeeded,
    )
    return result


def source_catalog(
    *,
    config: CatalogConfig | None = None,
    cache: KeyValueCache | None = None,
    store: NodeStore | None = None,
    fetcher: CatalogFetcher | None = None,
) -> SourcingResult:
    return asyncio.run(
        source_catalog_async(config=config, cache=cache, store=store, fetcher=fetcher)
    )
