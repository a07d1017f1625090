"""Identity provider adapter backed by Firebase Authentication."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

import firebase_admin
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

from app.core.firebase import get_firebase_app

logger = logging.getLogger(__name__)


class AccountCreationError(RuntimeError):
    """Raised when the identity provider refuses to create an account."""


class TokenVerificationError(RuntimeError):
    """Raised when an identity token is malformed, expired or revoked."""


class IdentityService(ABC):
    @abstractmethod
    def create_account(self, email: str, password: str, display_name: str) -> str:
        """Create a login for ``email`` and return its opaque user id."""

    @abstractmethod
    def verify_token(self, token: str) -> str:
        """Return the user id the token was issued for."""


class FirebaseIdentityService(IdentityService):
    """Small wrapper around ``firebase_admin.auth``."""

    def __init__(self, app: Optional[firebase_admin.App] = None) -> None:
        self._app = app or get_firebase_app()

    def create_account(self, email: str, password: str, display_name: str) -> str:
        try:
            user_record = auth.create_user(
                email=email,
                password=password,
                display_name=display_name,
                app=self._app,
            )
        except (ValueError, FirebaseError) as exc:
            logger.warning("Firebase rejected account creation for %s: %s", email, exc)
            raise AccountCreationError(str(exc)) from exc
        return user_record.uid

    def verify_token(self, token: str) -> str:
        try:
            decoded = auth.verify_id_token(token, app=self._app)
        except (ValueError, FirebaseError) as exc:
            raise TokenVerificationError(str(exc)) from exc
        return decoded["uid"]


__all__ = [
    "AccountCreationError",
    "FirebaseIdentityService",
    "IdentityService",
    "TokenVerificationError",
]
