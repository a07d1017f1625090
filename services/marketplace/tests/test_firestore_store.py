from types import SimpleNamespace

import pytest
from google.api_core.exceptions import ServiceUnavailable

from app.core.errors import StorageError
from app.repository import FirestoreDocumentStore


class StubSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data
        self.exists = data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class StubCollection:
    def __init__(self, documents=None, error=None, total=0):
        self.documents = documents or {}
        self.error = error
        self.total = total
        self.filters = []

    def _raise_if_failing(self):
        if self.error is not None:
            raise self.error

    def where(self, *, filter):
        self.filters.append(filter)
        return self

    def stream(self):
        self._raise_if_failing()
        return [StubSnapshot(doc_id, data) for doc_id, data in self.documents.items()]

    def document(self, doc_id):
        collection = self

        def _get(**_kwargs):
            collection._raise_if_failing()
            return StubSnapshot(doc_id, collection.documents.get(doc_id))

        return SimpleNamespace(get=_get)

    def count(self):
        def _get():
            self._raise_if_failing()
            return [[SimpleNamespace(alias="all", value=self.total)]]

        return SimpleNamespace(get=_get)


class StubClient:
    def __init__(self, collection):
        self._collection = collection

    def collection(self, _name):
        return self._collection


def test_query_applies_filters_and_returns_documents_with_ids():
    collection = StubCollection({"p1": {"name": "Ana"}, "p2": {"name": "Luis"}})
    store = FirestoreDocumentStore(client=StubClient(collection))

    documents = store.query(
        "professionals", [("blocked", "==", False), ("rubros", "array_contains", "gas")]
    )

    assert documents == [{"id": "p1", "name": "Ana"}, {"id": "p2", "name": "Luis"}]
    assert len(collection.filters) == 2


def test_get_returns_none_for_missing_document():
    store = FirestoreDocumentStore(client=StubClient(StubCollection({"p1": {"name": "Ana"}})))

    assert store.get("professionals", "p1") == {"id": "p1", "name": "Ana"}
    assert store.get("professionals", "missing") is None


def test_count_reads_the_aggregation_value():
    store = FirestoreDocumentStore(client=StubClient(StubCollection(total=42)))

    assert store.count("quotes") == 42


@pytest.mark.parametrize(
    "operation",
    [
        lambda store: store.query("professionals", [("blocked", "==", False)]),
        lambda store: store.get("professionals", "p1"),
        lambda store: store.count("quotes"),
    ],
)
def test_backend_errors_are_raised_as_storage_errors(operation):
    collection = StubCollection(error=ServiceUnavailable("backend unavailable"))
    store = FirestoreDocumentStore(client=StubClient(collection))

    with pytest.raises(StorageError) as excinfo:
        operation(store)

    assert isinstance(excinfo.value.__cause__, ServiceUnavailable)
