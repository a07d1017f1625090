"""Data access helpers for professionals."""

from __future__ import annotations

from typing import List, Optional

from app.models import COLLECTION_PROFESSIONALS, Professional
from app.repository.document_store import DocumentStore, Mutation


def create_professional(store: DocumentStore, professional: Professional) -> str:
    return store.insert(
        COLLECTION_PROFESSIONALS, professional.to_document(), doc_id=professional.id
    )


def get_professional(store: DocumentStore, professional_id: str) -> Optional[Professional]:
    document = store.get(COLLECTION_PROFESSIONALS, professional_id)
    return Professional.from_document(document) if document else None


def list_professionals(store: DocumentStore) -> List[Professional]:
    return [
        Professional.from_document(document)
        for document in store.query(COLLECTION_PROFESSIONALS)
    ]


def list_visible_professionals_by_rubro(store: DocumentStore, rubro: str) -> List[Professional]:
    """Return completed, unblocked profiles tagged with ``rubro``.

    Zone and photo checks are left to the caller; Firestore accepts a single
    ``array_contains`` clause per query.
    """
    documents = store.query(
        COLLECTION_PROFESSIONALS,
        [
            ("profileCompleted", "==", True),
            ("blocked", "==", False),
            ("rubros", "array_contains", rubro),
        ],
    )
    return [Professional.from_document(document) for document in documents]


def update_professional_atomically(
    store: DocumentStore, professional_id: str, mutate: Mutation
) -> Optional[Professional]:
    document = store.update_in_transaction(COLLECTION_PROFESSIONALS, professional_id, mutate)
    return Professional.from_document(document) if document else None
