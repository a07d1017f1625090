"""Authentication and authorization checks shared by the services."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from app.core.errors import Forbidden, InvalidToken, NotFound, Unauthenticated
from app.repository import DocumentStore, is_admin_user
from app.services.identity_client import IdentityService, TokenVerificationError

logger = logging.getLogger(__name__)

ROLE_ADMIN = "admin"


class OwnedResource(Protocol):
    @property
    def owner_user_id(self) -> str: ...


class AuthorizationGuard:
    """Verifies identity tokens and enforces ownership and role checks."""

    def __init__(self, identity: IdentityService, store: DocumentStore) -> None:
        self._identity = identity
        self._store = store

    def require_auth(self, token: Optional[str]) -> str:
        if not token:
            raise Unauthenticated("Not authenticated")
        try:
            return self._identity.verify_token(token)
        except TokenVerificationError as exc:
            logger.warning("Rejected identity token: %s", exc)
            raise InvalidToken("Invalid or expired authentication token") from exc

    def require_ownership(
        self,
        resource: Optional[OwnedResource],
        user_id: str,
        *,
        not_found_message: str = "Resource not found",
    ) -> None:
        if resource is None:
            raise NotFound(not_found_message)
        if resource.owner_user_id != user_id:
            logger.warning("User %s attempted to act on a resource it does not own", user_id)
            raise Forbidden("Not authorized")

    def has_role(self, user_id: str, role: str) -> bool:
        if role == ROLE_ADMIN:
            return is_admin_user(self._store, user_id)
        return False

    def require_admin(self, user_id: str) -> None:
        if not self.has_role(user_id, ROLE_ADMIN):
            logger.warning("User %s requested an admin-only resource", user_id)
            raise Forbidden("Not authorized")


__all__ = ["AuthorizationGuard", "OwnedResource", "ROLE_ADMIN"]
