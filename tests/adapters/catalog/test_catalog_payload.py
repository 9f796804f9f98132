from __future__ import annotations

import logging

import pytest

from learngraph.adapters.catalog import CatalogPayload


def test_collection_sizes(catalog_document: dict[str, list[dict[str, object]]]) -> None:
    payload = CatalogPayload.model_validate(catalog_document)

    sizes = payload.collection_sizes()

    assert sizes["learningPaths"] == 1
    assert sizes["units"] == 2
    assert sizes["products"] == 2


def test_missing_and_malformed_collections_are_not_rejected() -> None:
    payload = CatalogPayload.model_validate({"modules": {"uid": "m1"}})

    sizes = payload.collection_sizes()

    assert sizes["modules"] is None
    assert sizes["exams"] is None


def test_unmodeled_keys_are_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="learngraph.adapters.catalog.schema"):
        CatalogPayload.model_validate({"modules": [], "appliedSkills-test-key": []})
        CatalogPayload.model_validate({"modules": [], "appliedSkills-test-key": []})

    messages = [record.getMessage() for record in caplog.records]
    assert sum("appliedSkills-test-key" in message for message in messages) == 1
