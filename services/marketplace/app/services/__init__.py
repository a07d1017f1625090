from .admin_service import AdminService
from .authorization import ROLE_ADMIN, AuthorizationGuard
from .banner_service import BannerService
from .identity_client import (
    AccountCreationError,
    FirebaseIdentityService,
    IdentityService,
    TokenVerificationError,
)
from .professional_service import ProfessionalService, RankedProfessional
from .quote_service import QuoteService

__all__ = [
    "AccountCreationError",
    "AdminService",
    "AuthorizationGuard",
    "BannerService",
    "FirebaseIdentityService",
    "IdentityService",
    "ProfessionalService",
    "QuoteService",
    "RankedProfessional",
    "ROLE_ADMIN",
    "TokenVerificationError",
]
