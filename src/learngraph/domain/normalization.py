"""Convert a catalog document into typed, content-addressed nodes."""

from __future__ import annotations

import hashlib
import json
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any

from .model import NODE_TYPES, Node, NodeType, collection_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .model import CatalogDocument, RawRecord

log = getLogger(__name__)


class NormalizationError(ValueError):
    """Raised when a collection or record cannot be turned into nodes."""

    def __init__(
        self,
        message: str,
        *,
        node_type: NodeType,
        collection: str,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.node_type = node_type
        self.collection = collection
        self.index = index


@dataclass(frozen=True, slots=True)
class NormalizationSuccess:
    nodes: tuple[Node, ...]

    def counts(self) -> dict[NodeType, int]:
        counter = Counter(node.type for node in self.nodes)
        return {node_type: counter.get(node_type, 0) for node_type in NODE_TYPES}


@dataclass(frozen=True, slots=True)
class NormalizationFailure:
    error: NormalizationError


type NormalizationResult = NormalizationSuccess | NormalizationFailure


def canonical_json(record: RawRecord) -> str:
    """Serialize ``record`` deterministically (sorted keys, compact separators)."""

    return json.dumps(record, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def content_digest(content: str) -> str:
    return hashlib.md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()


def resolve_node_id(record: RawRecord) -> str | None:
    """Prefer ``uid`` over ``id``; empty values count as missing."""

    for key in ("uid", "id"):
        value = record.get(key)
        if value is not None and value != "":
            return str(value)
    return None


def build_node(record: RawRecord, node_type: NodeType, *, collection: str, index: int) -> Node:
    if not isinstance(record, Mapping):
        raise NormalizationError(
            f"{collection}[{index}] is not an object: {type(record).__name__}",
            node_type=node_type,
            collection=collection,
            index=index,
        )
    node_id = resolve_node_id(record)
    if node_id is None:
        raise NormalizationError(
            f"{collection}[{index}] has neither 'uid' nor 'id'",
            node_type=node_type,
            collection=collection,
            index=index,
        )
    fields: dict[str, Any] = dict(record)
    content = canonical_json(fields)
    return Node(
        id=node_id,
        type=node_type,
        content=content,
        content_digest=content_digest(content),
        fields=fields,
    )


def _collection_records(
    document: CatalogDocument, node_type: NodeType
) -> tuple[str, Sequence[RawRecord]]:
    name = collection_name(node_type)
    if name not in document:
        raise NormalizationError(
            f"Catalog document has no '{name}' collection",
            node_type=node_type,
            collection=name,
        )
    records = document[name]
    if not isinstance(records, list | tuple):
        raise NormalizationError(
            f"Catalog collection '{name}' is not a list: {type(records).__name__}",
            node_type=node_type,
            collection=name,
        )
    return name, records


def iter_nodes(
    document: CatalogDocument,
    node_types: Sequence[NodeType] = NODE_TYPES,
) -> Iterable[Node]:
    """Yield nodes type by type, then in collection order.

    Raises ``NormalizationError`` at the first collection or record that cannot
    be converted.
    """

    for node_type in node_types:
        name, records = _collection_records(document, node_type)
        for index, record in enumerate(records):
            yield build_node(record, node_type, collection=name, index=index)


def normalize_catalog(
    document: CatalogDocument,
    node_types: Sequence[NodeType] = NODE_TYPES,
) -> NormalizationResult:
    """Normalize the whole document; any failure fails the entire pass."""

    if not isinstance(document, Mapping):
        first = node_types[0] if node_types else NODE_TYPES[0]
        return NormalizationFailure(
            NormalizationError(
                f"Catalog document is not an object: {type(document).__name__}",
                node_type=first,
                collection=collection_name(first),
            )
        )
    try:
        nodes = tuple(iter_nodes(document, node_types))
    except NormalizationError as exc:
        return NormalizationFailure(exc)
    log.debug("Normalized %s catalog nodes", len(nodes))
    return NormalizationSuccess(nodes)
