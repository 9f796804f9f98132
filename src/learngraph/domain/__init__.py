"""Catalog graph domain: node model, link schema and the sourcing pipeline."""

from __future__ import annotations

from .cache import CacheGateway, build_cache_key
from .model import COLLECTION_BY_NODE_TYPE, NODE_TYPES, CatalogDocument, Node, NodeType
from .normalization import (
    NormalizationError,
    NormalizationFailure,
    NormalizationResult,
    NormalizationSuccess,
    normalize_catalog,
)
from .pipeline import CatalogSourcingPipeline, SourcingResult
from .refresh import LoadedCatalog, RefreshOptions, load_catalog, should_use_cache
from .schema import (
    CATALOG_SCHEMA,
    LINKS,
    Cardinality,
    LinkDeclaration,
    TypeDeclaration,
    declare_schema,
    links_for,
    render_type_definitions,
)

__all__ = [
    "CATALOG_SCHEMA",
    "COLLECTION_BY_NODE_TYPE",
    "LINKS",
    "NODE_TYPES",
    "CacheGateway",
    "Cardinality",
    "CatalogDocument",
    "CatalogSourcingPipeline",
    "LinkDeclaration",
    "LoadedCatalog",
    "Node",
    "NodeType",
    "NormalizationError",
    "NormalizationFailure",
    "NormalizationResult",
    "NormalizationSuccess",
    "RefreshOptions",
    "SourcingResult",
    "TypeDeclaration",
    "build_cache_key",
    "declare_schema",
    "links_for",
    "load_catalog",
    "normalize_catalog",
    "render_type_definitions",
    "should_use_cache",
]
