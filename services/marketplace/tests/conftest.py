"""Shared fixtures: in-memory store, fake identity provider and a frozen clock."""

import os
import random
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Make `import app` work when pytest is launched from the service directory.
SERVICE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

from fastapi.testclient import TestClient  # noqa: E402

from app.dependencies import (  # noqa: E402
    get_clock,
    get_document_store,
    get_identity_service,
    get_random,
)
from app.main import app  # noqa: E402
from app.models import COLLECTION_ADMIN_USERS, COLLECTION_BANNERS, Professional  # noqa: E402
from app.repository import InMemoryDocumentStore, create_professional  # noqa: E402
from app.services import AuthorizationGuard  # noqa: E402
from tests.fakes import FakeIdentityService, FixedClock  # noqa: E402

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock(now) -> FixedClock:
    return FixedClock(now)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def identity() -> FakeIdentityService:
    return FakeIdentityService()


@pytest.fixture
def guard(identity, store) -> AuthorizationGuard:
    return AuthorizationGuard(identity, store)


@pytest.fixture
def client(store, identity, clock):
    app.dependency_overrides[get_document_store] = lambda: store
    app.dependency_overrides[get_identity_service] = lambda: identity
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_random] = lambda: random.Random(7)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def add_professional(store, now):
    """Store a professional whose profile is complete unless overridden."""

    def _add(professional_id: str, **overrides) -> Professional:
        fields = {
            "id": professional_id,
            "user_id": professional_id,
            "email": f"{professional_id}@example.com",
            "name": f"Pro {professional_id}",
            "phone": "341-555-0101",
            "photo_url": f"https://cdn.example.com/{professional_id}.jpg",
            "rubros": ["plomeria"],
            "zonas": ["centro"],
            "profile_completed": True,
            "created_at": now - timedelta(days=90),
        }
        fields.update(overrides)
        professional = Professional(**fields)
        create_professional(store, professional)
        return professional

    return _add


@pytest.fixture
def add_banner(store, now):
    def _add(banner_id: str, **overrides) -> str:
        document = {
            "active": True,
            "startDate": now - timedelta(days=1),
            "endDate": now + timedelta(days=1),
            "city": "Rosario",
            "position": "top",
            "rubros": ["all"],
            "imageUrl": f"https://cdn.example.com/banners/{banner_id}.png",
        }
        document.update(overrides)
        return store.insert(COLLECTION_BANNERS, document, doc_id=banner_id)

    return _add


@pytest.fixture
def make_admin(store):
    def _make(user_id: str) -> None:
        store.insert(COLLECTION_ADMIN_USERS, {"email": f"{user_id}@example.com"}, doc_id=user_id)

    return _make
