"""In-memory node store that resolves declared by-id links."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, Any

from learngraph.domain.model import NodeType
from learngraph.domain.schema import Cardinality

if TYPE_CHECKING:
    from learngraph.domain.schema import LinkDeclaration, TypeDeclaration

log = getLogger(__name__)

type NodeRecord = Mapping[str, Any]


class UnknownNodeError(LookupError):
    """Raised when a node id is not present in the store."""


class InMemoryNodeStore:
    """Keeps created nodes by id and answers link lookups.

    A later ``create_node`` with the same id replaces the earlier record.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, NodeRecord] = {}
        self._declarations: dict[NodeType, TypeDeclaration] = {}

    def create_node(self, record: Mapping[str, Any]) -> None:
        node_id = record["id"]
        if node_id in self._nodes:
            log.warning("Replacing existing node %s", node_id)
        self._nodes[node_id] = record

    def declare_types(self, declarations: tuple[TypeDeclaration, ...]) -> None:
        for declaration in declarations:
            self._declarations[declaration.node_type] = declaration

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def declarations(self) -> Mapping[NodeType, TypeDeclaration]:
        return self._declarations

    def get_node(self, node_id: str) -> NodeRecord:
        try:
            return self._nodes[node_id]
        except KeyError as exc:
            raise UnknownNodeError(node_id) from exc

    def nodes_of_type(self, node_type: NodeType) -> list[NodeRecord]:
        return [node for node in self._nodes.values() if node_type_of(node) is node_type]

    def counts(self) -> dict[NodeType, int]:
        counts: dict[NodeType, int] = defaultdict(int)
        for node in self._nodes.values():
            counts[node_type_of(node)] += 1
        return dict(counts)

    def resolve(self, node_id: str, field_name: str) -> NodeRecord | list[NodeRecord] | None:
        """Follow the declared link ``field_name`` from node ``node_id``.

        Single links return the target or ``None``; list links return the
        targets found, in field order. Ids that match no node of the target
        type are skipped.
        """

        node = self.get_node(node_id)
        link = self._link(node_type_of(node), field_name)
        value = node.get(field_name)
        if link.cardinality is Cardinality.ONE:
            return self._lookup(value, link.target)
        if value is None:
            return []
        identifiers = value if isinstance(value, list) else [value]
        resolved: list[NodeRecord] = []
        for identifier in identifiers:
            target = self._lookup(identifier, link.target)
            if target is not None:
                resolved.append(target)
        return resolved

    def _link(self, node_type: NodeType, field_name: str) -> LinkDeclaration:
        declaration = self._declarations.get(node_type)
        links = declaration.links if declaration is not None else ()
        for link in links:
            if link.field == field_name:
                return link
        raise KeyError(f"No link declared for {node_type}.{field_name}")

    def _lookup(self, identifier: object, target: NodeType) -> NodeRecord | None:
        if not isinstance(identifier, str):
            return None
        node = self._nodes.get(identifier)
        if node is None or node_type_of(node) is not target:
            return None
        return node


def node_type_of(record: NodeRecord) -> NodeType:
    return NodeType(record["internal"]["type"])
