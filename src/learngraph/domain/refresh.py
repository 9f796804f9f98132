"""Decide between the cached catalog document and a fresh fetch."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cache import CacheGateway
    from .model import CatalogDocument
    from .ports import CatalogFetcher

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RefreshOptions:
    cache_response: bool = False
    force_clear: bool = False


@dataclass(frozen=True, slots=True)
class LoadedCatalog:
    document: CatalogDocument
    from_cache: bool


def should_use_cache(
    cached: CatalogDocument | None,
    *,
    cache_response: bool,
    force_clear: bool,
) -> bool:
    """Cached data is honoured only if present, opted into, and not force-cleared."""

    return bool(cached) and cache_response and not force_clear


async def load_catalog(
    gateway: CacheGateway,
    fetcher: CatalogFetcher,
    options: RefreshOptions | None = None,
) -> LoadedCatalog:
    """Return the catalog document, fetching and storing it unless the cache is usable.

    The slot is cleared before the fetch starts, so a failed or interrupted
    fetch leaves the cache empty rather than stale. Fetch errors propagate.
    """

    active = options if options is not None else RefreshOptions()
    cached = await gateway.get()
    if cached is not None and should_use_cache(
        cached, cache_response=active.cache_response, force_clear=active.force_clear
    ):
        log.info("Using cached catalog data from %s", gateway.key)
        return LoadedCatalog(document=cached, from_cache=True)

    log.info(
        "Fetching fresh catalog data (cache_key=%s, cached=%s, cache_response=%s, force_clear=%s)",
        gateway.key,
        cached is not None,
        active.cache_response,
        active.force_clear,
    )
    await gateway.set(None)
    document = await fetcher()
    await gateway.set(document)
    return LoadedCatalog(document=document, from_cache=False)
