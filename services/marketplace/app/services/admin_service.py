"""Aggregated counters for the admin dashboard."""

from __future__ import annotations

from typing import Optional

from app.core.clock import Clock, utc_now
from app.repository import DocumentStore, count_clicks, count_quotes, list_professionals
from app.schemas import AdminStatsResponse
from app.services.authorization import AuthorizationGuard
from app.services.ranking import is_featured_active


class AdminService:
    def __init__(
        self,
        store: DocumentStore,
        guard: AuthorizationGuard,
        *,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._guard = guard
        self._clock = clock

    def get_stats(self, auth_token: Optional[str]) -> AdminStatsResponse:
        user_id = self._guard.require_auth(auth_token)
        self._guard.require_admin(user_id)

        # Promotions lapse by time alone, so the stored flags cannot be trusted.
        now = self._clock()
        professionals = list_professionals(self._store)
        featured_active = sum(
            1 for professional in professionals if is_featured_active(professional, now)
        )

        return AdminStatsResponse(
            total_professionals=len(professionals),
            featured_active_count=featured_active,
            total_quotes=count_quotes(self._store),
            total_clicks=count_clicks(self._store),
        )


__all__ = ["AdminService"]
