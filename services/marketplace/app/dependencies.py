"""Process-scoped collaborators injected into the routes.

The store and identity clients are created once per process; tests swap them
through ``app.dependency_overrides``.
"""

import random
from functools import lru_cache

from fastapi import Depends

from app.core.clock import Clock, utc_now
from app.core.config import settings
from app.repository import DocumentStore, FirestoreDocumentStore, InMemoryDocumentStore
from app.services import AuthorizationGuard, FirebaseIdentityService, IdentityService


@lru_cache()
def get_document_store() -> DocumentStore:
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryDocumentStore()
    if settings.STORAGE_BACKEND == "firestore":
        return FirestoreDocumentStore()
    raise RuntimeError(f"Unsupported STORAGE_BACKEND '{settings.STORAGE_BACKEND}'")


@lru_cache()
def get_identity_service() -> IdentityService:
    return FirebaseIdentityService()


def get_clock() -> Clock:
    return utc_now


@lru_cache()
def get_random() -> random.Random:
    return random.Random()


def get_guard(
    store: DocumentStore = Depends(get_document_store),
    identity: IdentityService = Depends(get_identity_service),
) -> AuthorizationGuard:
    return AuthorizationGuard(identity, store)
