"""Repository helpers for the marketplace service."""

from app.repository.admin_repository import is_admin_user
from app.repository.banner_repository import (
    count_clicks,
    create_click,
    get_banner,
    list_started_banners,
)
from app.repository.document_store import (
    DocumentStore,
    FirestoreDocumentStore,
    InMemoryDocumentStore,
)
from app.repository.professional_repository import (
    create_professional,
    get_professional,
    list_professionals,
    list_visible_professionals_by_rubro,
    update_professional_atomically,
)
from app.repository.quote_repository import count_quotes, create_quote

__all__ = [
    "DocumentStore",
    "FirestoreDocumentStore",
    "InMemoryDocumentStore",
    "count_clicks",
    "count_quotes",
    "create_click",
    "create_professional",
    "create_quote",
    "get_banner",
    "get_professional",
    "is_admin_user",
    "list_professionals",
    "list_started_banners",
    "list_visible_professionals_by_rubro",
    "update_professional_atomically",
]
