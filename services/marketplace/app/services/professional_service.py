"""Registration, search and profile updates for professionals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from app.core.clock import Clock, utc_now
from app.core.config import settings
from app.core.errors import InvalidArgument, NotFound
from app.models import EDITABLE_FIELDS, Professional
from app.repository import (
    DocumentStore,
    create_professional,
    get_professional,
    list_visible_professionals_by_rubro,
    update_professional_atomically,
)
from app.schemas import ProfessionalResponse, ProfessionalUpdate
from app.services.authorization import AuthorizationGuard
from app.services.identity_client import AccountCreationError, IdentityService
from app.services.ranking import RankingResult, is_profile_complete, score_professional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedProfessional:
    professional: Professional
    ranking: RankingResult

    def to_response(self) -> ProfessionalResponse:
        p = self.professional
        return ProfessionalResponse(
            id=p.id,
            user_id=p.user_id,
            email=p.email,
            name=p.name,
            phone=p.phone,
            photo_url=p.photo_url,
            rubros=p.rubros,
            zonas=p.zonas,
            rating=p.rating,
            reviews_count=p.reviews_count,
            jobs_completed=p.jobs_completed,
            last_active=p.last_active,
            profile_completed=p.profile_completed,
            is_featured=p.is_featured,
            featured_until=p.featured_until,
            ranking_score=self.ranking.score,
            is_featured_active=self.ranking.featured_active,
            blocked=p.blocked,
            created_at=p.created_at,
        )


def parse_limit(raw_limit: Union[str, int, None], default: int) -> int:
    if raw_limit is None or raw_limit == "":
        return default
    if isinstance(raw_limit, bool):
        raise InvalidArgument("limit must be a positive integer")
    try:
        limit = int(raw_limit)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument("limit must be a positive integer") from exc
    if limit <= 0:
        raise InvalidArgument("limit must be a positive integer")
    return limit


class ProfessionalService:
    """Service layer encapsulating professional operations."""

    def __init__(
        self,
        store: DocumentStore,
        *,
        guard: Optional[AuthorizationGuard] = None,
        identity: Optional[IdentityService] = None,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._guard = guard
        self._identity = identity
        self._clock = clock

    def register(self, email: str, password: str, name: str, phone: str) -> str:
        if not (email and password and name and phone):
            raise InvalidArgument("Missing required fields")
        if self._identity is None:
            raise RuntimeError("ProfessionalService.register requires an identity service")

        try:
            user_id = self._identity.create_account(email, password, name)
        except AccountCreationError as exc:
            raise InvalidArgument(str(exc)) from exc

        professional = Professional(
            id=user_id,
            user_id=user_id,
            email=email,
            name=name,
            phone=phone,
            created_at=self._clock(),
        )
        create_professional(self._store, professional)
        logger.info("Registered professional %s", user_id)
        return user_id

    def search(
        self,
        rubro: Optional[str],
        zona: Optional[str],
        limit: Union[str, int, None] = None,
    ) -> List[RankedProfessional]:
        if not rubro or not zona:
            raise InvalidArgument("rubro and zona are required")
        max_results = parse_limit(limit, settings.SEARCH_DEFAULT_LIMIT)
        zone_filter = None if zona == settings.ALL_ZONES_SENTINEL else zona

        now = self._clock()
        ranked = [
            RankedProfessional(professional, score_professional(professional, now))
            for professional in list_visible_professionals_by_rubro(self._store, rubro)
            if professional.photo_url
            and not professional.blocked
            and professional.profile_completed
            and (zone_filter is None or zone_filter in professional.zonas)
        ]

        # sorted() is stable, so ties keep the store's scan order.
        ranked = sorted(
            ranked,
            key=lambda item: (not item.ranking.featured_active, -item.ranking.score),
        )
        return ranked[:max_results]

    def update_professional(
        self,
        professional_id: Optional[str],
        updates: Union[ProfessionalUpdate, Dict[str, Any], None],
        auth_token: Optional[str],
    ) -> bool:
        """Apply a partial profile update and return the recomputed completeness flag."""
        if self._guard is None:
            raise RuntimeError("ProfessionalService.update_professional requires a guard")

        user_id = self._guard.require_auth(auth_token)
        if not professional_id:
            raise InvalidArgument("professionalId is required")
        professional = get_professional(self._store, professional_id)
        self._guard.require_ownership(
            professional, user_id, not_found_message="Professional not found"
        )

        patch = self._editable_fields(updates)
        now = self._clock()

        def _merge(current: Dict[str, Any]) -> Dict[str, Any]:
            changes = {**patch, "lastActive": now}
            changes["profileCompleted"] = is_profile_complete({**current, **changes})
            return changes

        updated = update_professional_atomically(self._store, professional_id, _merge)
        if updated is None:
            raise NotFound("Professional not found")

        logger.info(
            "Professional %s updated fields %s (profileCompleted=%s)",
            professional_id,
            sorted(patch),
            updated.profile_completed,
        )
        return updated.profile_completed

    @staticmethod
    def _editable_fields(
        updates: Union[ProfessionalUpdate, Dict[str, Any], None],
    ) -> Dict[str, Any]:
        if updates is None:
            return {}
        if isinstance(updates, dict):
            try:
                updates = ProfessionalUpdate.model_validate(updates)
            except ValidationError as exc:
                raise InvalidArgument("Invalid profile updates") from exc
        supplied = updates.model_dump(exclude_unset=True, by_alias=True)
        return {key: value for key, value in supplied.items() if key in EDITABLE_FIELDS}


__all__ = ["ProfessionalService", "RankedProfessional", "parse_limit"]
