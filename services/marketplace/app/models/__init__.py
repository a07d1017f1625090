from .banner import Banner, ClickEvent
from .collections import (
    COLLECTION_AD_CLICKS,
    COLLECTION_ADMIN_USERS,
    COLLECTION_BANNERS,
    COLLECTION_PROFESSIONALS,
    COLLECTION_QUOTES,
)
from .professional import EDITABLE_FIELDS, Professional
from .quote import Quote, QuoteStatus

__all__ = [
    "Banner",
    "ClickEvent",
    "COLLECTION_AD_CLICKS",
    "COLLECTION_ADMIN_USERS",
    "COLLECTION_BANNERS",
    "COLLECTION_PROFESSIONALS",
    "COLLECTION_QUOTES",
    "EDITABLE_FIELDS",
    "Professional",
    "Quote",
    "QuoteStatus",
]
