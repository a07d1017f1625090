from datetime import datetime, timedelta, timezone

import pytest

from app.core.errors import StorageError
from app.repository import InMemoryDocumentStore

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)


@pytest.fixture
def populated_store():
    store = InMemoryDocumentStore()
    store.insert("items", {"kind": "a", "tags": ["x", "y"], "at": NOW}, doc_id="1")
    store.insert("items", {"kind": "b", "tags": ["y"], "at": NOW + timedelta(days=1)}, doc_id="2")
    store.insert("items", {"kind": "a", "at": NOW - timedelta(days=1)}, doc_id="3")
    return store


def test_query_combines_filters_in_insertion_order(populated_store):
    results = populated_store.query(
        "items", [("tags", "array_contains", "y"), ("at", ">=", NOW)]
    )

    assert [doc["id"] for doc in results] == ["1", "2"]


def test_documents_without_the_filtered_field_never_match(populated_store):
    results = populated_store.query("items", [("tags", "array_contains", "x")])

    assert [doc["id"] for doc in results] == ["1"]


def test_unsupported_operator_is_rejected(populated_store):
    with pytest.raises(ValueError):
        populated_store.query("items", [("kind", "in", ["a"])])


def test_returned_documents_are_copies(populated_store):
    document = populated_store.get("items", "1")
    document["tags"].append("z")

    assert populated_store.get("items", "1")["tags"] == ["x", "y"]


def test_update_in_transaction_merges_changes(populated_store):
    merged = populated_store.update_in_transaction(
        "items", "1", lambda current: {"kind": current["kind"] + "!"}
    )

    assert merged["kind"] == "a!"
    assert merged["tags"] == ["x", "y"]
    assert populated_store.get("items", "1")["kind"] == "a!"


def test_update_in_transaction_on_missing_document_returns_none(populated_store):
    assert populated_store.update_in_transaction("items", "missing", lambda _: {}) is None


def test_update_of_missing_document_raises_storage_error(populated_store):
    with pytest.raises(StorageError):
        populated_store.update("items", "missing", {"kind": "c"})


def test_count_and_generated_ids(populated_store):
    new_id = populated_store.insert("items", {"kind": "c"})

    assert new_id
    assert populated_store.count("items") == 4
    assert populated_store.count("empty") == 0
