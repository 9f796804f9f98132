"""Catalog sourcing pipeline: load, normalize, emit, invalidate on failure."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .model import NODE_TYPES, NodeType
from .normalization import NormalizationFailure, normalize_catalog
from .refresh import RefreshOptions, load_catalog
from .schema import declare_schema

if TYPE_CHECKING:
    from .cache import CacheGateway
    from .ports import CatalogFetcher, NodeStore

log = getLogger(__name__)


@dataclass(slots=True)
class SourcingResult:
    """Outcome of a single sourcing run.

    ``error`` holds the ``NormalizationError`` for bad catalog content, or the
    exception the node store raised while nodes were being emitted.
    """

    from_cache: bool
    created: int = 0
    counts: dict[NodeType, int] = field(default_factory=dict[NodeType, int])
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class CatalogSourcingPipeline:
    """Wire the cache gateway, the fetcher and a node store into one run.

    ``source_nodes`` never raises on bad catalog content or on a node store
    that rejects a record: the failure is logged, the cache slot is
    invalidated so the next run refetches, and the error is returned on the
    result. Fetch errors are not caught here.
    """

    gateway: CacheGateway
    fetcher: CatalogFetcher
    store: NodeStore
    options: RefreshOptions = field(default_factory=RefreshOptions)
    node_types: tuple[NodeType, ...] = NODE_TYPES

    async def source_nodes(self) -> SourcingResult:
        loaded = await load_catalog(self.gateway, self.fetcher, self.options)

        outcome = normalize_catalog(loaded.document, self.node_types)
        if isinstance(outcome, NormalizationFailure):
            log.error("Error creating nodes: %s", outcome.error)
            await self.gateway.invalidate()
            return SourcingResult(from_cache=loaded.from_cache, error=outcome.error)

        created = 0
        try:
            for node in outcome.nodes:
                self.store.create_node(node.to_record())
                created += 1
        except Exception as exc:
            log.exception("Error creating nodes: node store failed after %s nodes", created)
            await self.gateway.invalidate()
            return SourcingResult(from_cache=loaded.from_cache, created=created, error=exc)

        counts = outcome.counts()
        for node_type, count in counts.items():
            log.info("Created %s %s nodes", count, node_type)
        return SourcingResult(
            from_cache=loaded.from_cache,
            created=created,
            counts=counts,
        )

    def create_schema_customization(self) -> None:
        declare_schema(self.store)
