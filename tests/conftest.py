from __future__ import annotations

import os

import pytest

from tests.support.catalog import FakeCatalogFetcher, RecordingCache, sample_catalog

os.environ.setdefault("LEARNGRAPH_CACHE_URI", "sqlite+pysqlite:///:memory:")


@pytest.fixture
def catalog_document() -> dict[str, list[dict[str, object]]]:
    return sample_catalog()


@pytest.fixture
def recording_cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def fetcher(catalog_document: dict[str, list[dict[str, object]]]) -> FakeCatalogFetcher:
    return FakeCatalogFetcher(catalog_document)
