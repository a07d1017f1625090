"""Data access helpers for the admin user markers."""

from __future__ import annotations

from app.models import COLLECTION_ADMIN_USERS
from app.repository.document_store import DocumentStore


def is_admin_user(store: DocumentStore, user_id: str) -> bool:
    return store.get(COLLECTION_ADMIN_USERS, user_id) is not None
