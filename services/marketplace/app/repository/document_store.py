"""Document store abstraction with Firestore and in-memory backends.

Services rely on insert, fetch by id, field updates, transactional
read-modify-write, filtered scans and counts. Documents are returned as plain
dicts with the document id under ``"id"``.

Filters are ``(field, operator, value)`` triples. Supported operators are
``==``, ``<``, ``<=``, ``>``, ``>=`` and ``array_contains``; a document
lacking the filtered field never matches.
"""

from __future__ import annotations

import copy
import threading
import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import FieldFilter, transactional

from app.core.errors import StorageError
from app.core.firebase import get_firestore_client

Document = Dict[str, Any]
Filter = Tuple[str, str, Any]
Mutation = Callable[[Document], Document]

SUPPORTED_OPERATORS = {"==", "<", "<=", ">", ">=", "array_contains"}


class DocumentStore(ABC):
    """Minimal contract the marketplace services need from storage."""

    @abstractmethod
    def insert(self, collection: str, data: Document, doc_id: Optional[str] = None) -> str:
        """Store a new document and return its id."""

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        """Return the document or ``None`` when it does not exist."""

    @abstractmethod
    def update(self, collection: str, doc_id: str, fields: Document) -> None:
        """Overwrite the given fields of an existing document."""

    @abstractmethod
    def update_in_transaction(
        self, collection: str, doc_id: str, mutate: Mutation
    ) -> Optional[Document]:
        """Atomically read a document, compute changes with ``mutate`` and apply them.

        ``mutate`` receives the current document and returns the fields to
        write. Returns the merged document, or ``None`` if it does not exist.
        """

    @abstractmethod
    def query(self, collection: str, filters: Sequence[Filter] = ()) -> List[Document]:
        """Return every document matching all ``filters``, in a stable order."""

    @abstractmethod
    def count(self, collection: str) -> int:
        """Return the number of documents in ``collection``."""


def _validate_filters(filters: Sequence[Filter]) -> None:
    for _, operator, _ in filters:
        if operator not in SUPPORTED_OPERATORS:
            raise ValueError(f"Unsupported filter operator '{operator}'")


def _matches(data: Document, field: str, operator: str, value: Any) -> bool:
    if field not in data:
        return False
    current = data[field]
    if operator == "array_contains":
        return isinstance(current, (list, tuple)) and value in current
    if operator == "==":
        return current == value
    if current is None:
        return False
    if operator == "<":
        return current < value
    if operator == "<=":
        return current <= value
    if operator == ">":
        return current > value
    return current >= value


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store for development and tests.

    Scans return documents in insertion order. A single lock serialises
    transactional updates.
    """

    def __init__(self) -> None:
        self._collections: Dict[str, Dict[str, Document]] = {}
        self._lock = threading.Lock()

    def _collection(self, name: str) -> Dict[str, Document]:
        return self._collections.setdefault(name, {})

    def insert(self, collection: str, data: Document, doc_id: Optional[str] = None) -> str:
        doc_id = doc_id or uuid.uuid4().hex
        with self._lock:
            self._collection(collection)[doc_id] = copy.deepcopy(data)
        return doc_id

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        data = self._collection(collection).get(doc_id)
        if data is None:
            return None
        return {"id": doc_id, **copy.deepcopy(data)}

    def update(self, collection: str, doc_id: str, fields: Document) -> None:
        with self._lock:
            data = self._collection(collection).get(doc_id)
            if data is None:
                raise StorageError(f"Document {collection}/{doc_id} does not exist")
            data.update(copy.deepcopy(fields))

    def update_in_transaction(
        self, collection: str, doc_id: str, mutate: Mutation
    ) -> Optional[Document]:
        with self._lock:
            data = self._collection(collection).get(doc_id)
            if data is None:
                return None
            changes = mutate(copy.deepcopy(data))
            data.update(copy.deepcopy(changes))
            return {"id": doc_id, **copy.deepcopy(data)}

    def query(self, collection: str, filters: Sequence[Filter] = ()) -> List[Document]:
        _validate_filters(filters)
        return [
            {"id": doc_id, **copy.deepcopy(data)}
            for doc_id, data in list(self._collection(collection).items())
            if all(_matches(data, field, op, value) for field, op, value in filters)
        ]

    def count(self, collection: str) -> int:
        return len(self._collection(collection))


class FirestoreDocumentStore(DocumentStore):
    """Cloud Firestore implementation backed by ``firebase_admin``."""

    def __init__(self, client: Any = None) -> None:
        self._client = client or get_firestore_client()

    @contextmanager
    def _storage_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except GoogleAPIError as exc:
            raise StorageError(f"Failed to {action}: {exc}") from exc

    def insert(self, collection: str, data: Document, doc_id: Optional[str] = None) -> str:
        with self._storage_errors(f"insert into {collection}"):
            collection_ref = self._client.collection(collection)
            if doc_id:
                collection_ref.document(doc_id).set(data)
                return doc_id
            _, doc_ref = collection_ref.add(data)
            return doc_ref.id

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        with self._storage_errors(f"read {collection}/{doc_id}"):
            snapshot = self._client.collection(collection).document(doc_id).get()
        if not snapshot.exists:
            return None
        return {"id": snapshot.id, **(snapshot.to_dict() or {})}

    def update(self, collection: str, doc_id: str, fields: Document) -> None:
        with self._storage_errors(f"update {collection}/{doc_id}"):
            self._client.collection(collection).document(doc_id).update(fields)

    def update_in_transaction(
        self, collection: str, doc_id: str, mutate: Mutation
    ) -> Optional[Document]:
        doc_ref = self._client.collection(collection).document(doc_id)

        @transactional
        def _apply(transaction) -> Optional[Document]:
            snapshot = doc_ref.get(transaction=transaction)
            if not snapshot.exists:
                return None
            current = snapshot.to_dict() or {}
            changes = mutate(dict(current))
            transaction.update(doc_ref, changes)
            return {"id": doc_id, **current, **changes}

        with self._storage_errors(f"update {collection}/{doc_id}"):
            return _apply(self._client.transaction())

    def query(self, collection: str, filters: Sequence[Filter] = ()) -> List[Document]:
        _validate_filters(filters)
        with self._storage_errors(f"query {collection}"):
            query = self._client.collection(collection)
            for field, operator, value in filters:
                query = query.where(filter=FieldFilter(field, operator, value))
            return [
                {"id": snapshot.id, **(snapshot.to_dict() or {})}
                for snapshot in query.stream()
            ]

    def count(self, collection: str) -> int:
        with self._storage_errors(f"count {collection}"):
            results = self._client.collection(collection).count().get()
        return int(results[0][0].value)


__all__ = [
    "Document",
    "DocumentStore",
    "Filter",
    "FirestoreDocumentStore",
    "InMemoryDocumentStore",
    "Mutation",
]
