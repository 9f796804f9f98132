from __future__ import annotations

import asyncio

import pytest

from learngraph.adapters.nodes import InMemoryNodeStore
from learngraph.adapters.nodes.memory import UnknownNodeError
from learngraph.domain.cache import CacheGateway
from learngraph.domain.model import NodeType
from learngraph.domain.pipeline import CatalogSourcingPipeline
from tests.support.catalog import FakeCatalogFetcher, RecordingCache


@pytest.fixture
def populated_store(fetcher: FakeCatalogFetcher) -> InMemoryNodeStore:
    store = InMemoryNodeStore()
    pipeline = CatalogSourcingPipeline(
        gateway=CacheGateway(cache=RecordingCache(), key="key"),
        fetcher=fetcher,
        store=store,
    )
    pipeline.create_schema_customization()
    result = asyncio.run(pipeline.source_nodes())
    assert result.succeeded
    return store


def test_counts_by_type(populated_store: InMemoryNodeStore) -> None:
    counts = populated_store.counts()

    assert counts[NodeType.MODULE] == 1
    assert counts[NodeType.UNIT] == 2
    assert counts[NodeType.LEVEL] == 2
    assert len(populated_store) == sum(counts.values())


def test_module_resolves_units_in_field_order(populated_store: InMemoryNodeStore) -> None:
    units = populated_store.resolve("learn.azure.intro-to-storage", "units")

    assert isinstance(units, list)
    assert [unit["title"] for unit in units] == ["Introduction", "Storage accounts"]


def test_course_to_exam_to_certification(populated_store: InMemoryNodeStore) -> None:
    exam = populated_store.resolve("course.az-204t00", "exam")
    certification = populated_store.resolve("course.az-204t00", "certification")

    assert isinstance(exam, dict)
    assert exam["id"] == "exam.az-204"
    assert isinstance(certification, dict)
    exams = populated_store.resolve(certification["id"], "exams")
    assert exams == [exam]


def test_unknown_identifiers_are_skipped(populated_store: InMemoryNodeStore) -> None:
    products = populated_store.resolve("learn.azure.intro-to-storage", "products")

    assert isinstance(products, list)
    assert [product["id"] for product in products] == ["azure", "azure-storage"]

    store = InMemoryNodeStore()
    store.declare_types(tuple(populated_store.declarations.values()))
    store.create_node(
        {"id": "m1", "levels": ["expert"], "internal": {"type": "module"}},
    )
    assert store.resolve("m1", "levels") == []


def test_link_targets_must_match_declared_type(populated_store: InMemoryNodeStore) -> None:
    store = InMemoryNodeStore()
    store.declare_types(tuple(populated_store.declarations.values()))
    store.create_node({"id": "developer", "internal": {"type": "level"}})
    store.create_node({"id": "m1", "roles": ["developer"], "internal": {"type": "module"}})

    assert store.resolve("m1", "roles") == []


def test_undeclared_link_raises(populated_store: InMemoryNodeStore) -> None:
    with pytest.raises(KeyError):
        populated_store.resolve("learn.azure.intro-to-storage", "title")


def test_unknown_node_raises(populated_store: InMemoryNodeStore) -> None:
    with pytest.raises(UnknownNodeError):
        populated_store.get_node("missing")


def test_create_node_replaces_existing() -> None:
    store = InMemoryNodeStore()

    store.create_node({"id": "beginner", "name": "Old", "internal": {"type": "level"}})
    store.create_node({"id": "beginner", "name": "New", "internal": {"type": "level"}})

    assert len(store) == 1
    assert store.get_node("beginner")["name"] == "New"
    assert store.nodes_of_type(NodeType.LEVEL) == [store.get_node("beginner")]
