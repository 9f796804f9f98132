"""Catalog node model (pure, dependency-light)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Final

type RawRecord = Mapping[str, Any]
type CatalogDocument = Mapping[str, Sequence[RawRecord]]


class NodeType(StrEnum):
    CERTIFICATION = "certification"
    LEARNING_PATH = "learningPath"
    MODULE = "module"
    UNIT = "unit"
    EXAM = "exam"
    COURSE = "course"
    LEVEL = "level"
    ROLE = "role"
    PRODUCT = "product"


# Creation order; nodes are emitted type by type in this order.
NODE_TYPES: Final[tuple[NodeType, ...]] = tuple(NodeType)

COLLECTION_BY_NODE_TYPE: Final[Mapping[NodeType, str]] = MappingProxyType(
    {
        NodeType.CERTIFICATION: "certifications",
        NodeType.LEARNING_PATH: "learningPaths",
        NodeType.MODULE: "modules",
        NodeType.UNIT: "units",
        NodeType.EXAM: "exams",
        NodeType.COURSE: "courses",
        NodeType.LEVEL: "levels",
        NodeType.ROLE: "roles",
        NodeType.PRODUCT: "products",
    }
)


def collection_name(node_type: NodeType) -> str:
    """Return the catalog document key holding records of ``node_type``."""

    return COLLECTION_BY_NODE_TYPE[node_type]


@dataclass(frozen=True, slots=True)
class Node:
    """A normalized catalog record ready to be handed to a node store.

    ``fields`` is a shallow copy of the raw record; ``id`` is resolved from
    ``uid`` or ``id`` without rewriting either source field. ``parent`` and
    ``children`` exist for the store and are always empty at creation.
    """

    id: str
    type: NodeType
    content: str
    content_digest: str
    fields: Mapping[str, Any]
    parent: str | None = None
    children: tuple[str, ...] = field(default_factory=tuple)

    def to_record(self) -> dict[str, Any]:
        """Render the node in the shape expected by ``NodeStore.create_node``."""

        return {
            **self.fields,
            "id": self.id,
            "parent": self.parent,
            "children": list(self.children),
            "internal": {
                "type": str(self.type),
                "content": self.content,
                "contentDigest": self.content_digest,
            },
        }
