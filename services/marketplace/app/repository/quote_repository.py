"""Data access helpers for quotes."""

from __future__ import annotations

from app.models import COLLECTION_QUOTES, Quote
from app.repository.document_store import DocumentStore


def create_quote(store: DocumentStore, quote: Quote) -> str:
    return store.insert(COLLECTION_QUOTES, quote.to_document())


def count_quotes(store: DocumentStore) -> int:
    return store.count(COLLECTION_QUOTES)
