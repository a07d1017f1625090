from .admin import AdminStatsResponse
from .banner import (
    BannerResponse,
    BannerSelectionResponse,
    TrackClickRequest,
    TrackClickResponse,
)
from .professional import (
    ProfessionalResponse,
    ProfessionalSearchResponse,
    ProfessionalUpdate,
    RegisterRequest,
    RegisterResponse,
    UpdateProfessionalRequest,
    UpdateProfessionalResponse,
)
from .quote import CreateQuoteRequest, CreateQuoteResponse

__all__ = [
    "AdminStatsResponse",
    "BannerResponse",
    "BannerSelectionResponse",
    "CreateQuoteRequest",
    "CreateQuoteResponse",
    "ProfessionalResponse",
    "ProfessionalSearchResponse",
    "ProfessionalUpdate",
    "RegisterRequest",
    "RegisterResponse",
    "TrackClickRequest",
    "TrackClickResponse",
    "UpdateProfessionalRequest",
    "UpdateProfessionalResponse",
]
