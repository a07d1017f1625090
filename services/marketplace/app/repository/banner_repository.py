"""Data access helpers for banners and click events."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from app.models import COLLECTION_AD_CLICKS, COLLECTION_BANNERS, Banner, ClickEvent
from app.repository.document_store import DocumentStore, Filter


def get_banner(store: DocumentStore, banner_id: str) -> Optional[Banner]:
    document = store.get(COLLECTION_BANNERS, banner_id)
    return Banner.from_document(document) if document else None


def list_started_banners(
    store: DocumentStore,
    *,
    now: datetime,
    city: Optional[str] = None,
    position: Optional[str] = None,
) -> List[Banner]:
    """Return active banners whose window has opened by ``now``.

    The end of the window is checked by the caller so the query keeps a single
    range clause.
    """
    filters: List[Filter] = [
        ("active", "==", True),
        ("startDate", "<=", now),
    ]
    if city:
        filters.append(("city", "==", city))
    if position:
        filters.append(("position", "==", position))
    return [Banner.from_document(document) for document in store.query(COLLECTION_BANNERS, filters)]


def create_click(store: DocumentStore, click: ClickEvent) -> str:
    return store.insert(COLLECTION_AD_CLICKS, click.to_document())


def count_clicks(store: DocumentStore) -> int:
    return store.count(COLLECTION_AD_CLICKS)
