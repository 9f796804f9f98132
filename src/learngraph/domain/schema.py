"""Typed link declarations between catalog node types.

The table below is static metadata. It never touches catalog data: a node
store consults it to resolve fields such as ``module.units`` or
``course.exam`` into the nodes whose ``id`` matches the stored identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from .model import NodeType

if TYPE_CHECKING:
    from .ports import NodeStore


class Cardinality(StrEnum):
    ONE = "one"
    MANY = "many"


@dataclass(frozen=True, slots=True)
class LinkDeclaration:
    node_type: NodeType
    field: str
    target: NodeType
    cardinality: Cardinality = Cardinality.MANY

    def sdl(self) -> str:
        if self.cardinality is Cardinality.ONE:
            return f'{self.field}: {self.target} @link(by: "id")'
        return f'{self.field}: [{self.target}!] @link(by: "id")'


@dataclass(frozen=True, slots=True)
class FieldDeclaration:
    """A plain (non-link) field the store should type explicitly."""

    name: str
    sdl_type: str


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    node_type: NodeType
    links: tuple[LinkDeclaration, ...] = field(default_factory=tuple)
    fields: tuple[FieldDeclaration, ...] = field(default_factory=tuple)

    def sdl(self) -> str:
        lines = [f"type {self.node_type} implements Node {{"]
        lines.extend(f"  {item.name}: {item.sdl_type}" for item in self.fields)
        lines.extend(f"  {link.sdl()}" for link in self.links)
        lines.append("}")
        return "\n".join(lines)


def _many(node_type: NodeType, name: str, target: NodeType) -> LinkDeclaration:
    return LinkDeclaration(node_type, name, target, Cardinality.MANY)


def _one(node_type: NodeType, name: str, target: NodeType) -> LinkDeclaration:
    return LinkDeclaration(node_type, name, target, Cardinality.ONE)


def _classification_links(
    node_type: NodeType, *, products: bool = True
) -> tuple[LinkDeclaration, ...]:
    links = [
        _many(node_type, "levels", NodeType.LEVEL),
        _many(node_type, "roles", NodeType.ROLE),
    ]
    if products:
        links.append(_many(node_type, "products", NodeType.PRODUCT))
    return tuple(links)


_ID_FIELD = FieldDeclaration("id", "ID!")

CATALOG_SCHEMA: Final[tuple[TypeDeclaration, ...]] = (
    TypeDeclaration(
        NodeType.MODULE,
        links=(
            *_classification_links(NodeType.MODULE),
            _many(NodeType.MODULE, "units", NodeType.UNIT),
        ),
    ),
    TypeDeclaration(NodeType.UNIT, fields=(FieldDeclaration("uid", "ID!"),)),
    TypeDeclaration(
        NodeType.LEARNING_PATH,
        links=(
            *_classification_links(NodeType.LEARNING_PATH),
            _many(NodeType.LEARNING_PATH, "modules", NodeType.MODULE),
        ),
    ),
    TypeDeclaration(
        NodeType.CERTIFICATION,
        links=(
            *_classification_links(NodeType.CERTIFICATION, products=False),
            _many(NodeType.CERTIFICATION, "exams", NodeType.EXAM),
        ),
    ),
    TypeDeclaration(
        NodeType.EXAM,
        links=(
            _many(NodeType.EXAM, "courses", NodeType.COURSE),
            *_classification_links(NodeType.EXAM),
        ),
    ),
    TypeDeclaration(
        NodeType.COURSE,
        links=(
            _one(NodeType.COURSE, "exam", NodeType.EXAM),
            _one(NodeType.COURSE, "certification", NodeType.CERTIFICATION),
            *_classification_links(NodeType.COURSE),
        ),
    ),
    TypeDeclaration(NodeType.LEVEL, fields=(_ID_FIELD,)),
    TypeDeclaration(NodeType.ROLE, fields=(_ID_FIELD,)),
    TypeDeclaration(
        NodeType.PRODUCT,
        fields=(
            _ID_FIELD,
            FieldDeclaration("name", "String!"),
            FieldDeclaration("children", "[product!]"),
        ),
    ),
)

LINKS: Final[tuple[LinkDeclaration, ...]] = tuple(
    link for declaration in CATALOG_SCHEMA for link in declaration.links
)


def links_for(node_type: NodeType) -> tuple[LinkDeclaration, ...]:
    """Return the link declarations whose source is ``node_type``."""

    return tuple(link for link in LINKS if link.node_type is node_type)


def render_type_definitions(declarations: tuple[TypeDeclaration, ...] = CATALOG_SCHEMA) -> str:
    """Render the declarations as GraphQL SDL type definitions."""

    return "\n\n".join(declaration.sdl() for declaration in declarations) + "\n"


def declare_schema(store: NodeStore) -> None:
    """Register the catalog type declarations with ``store``.

    Independent of catalog data; safe to call on every build.
    """

    store.declare_types(CATALOG_SCHEMA)
