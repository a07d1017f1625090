"""Ranking score and eligibility rules for professionals.

Everything here is pure: the same professional and the same ``now`` always
produce the same result. Search ordering, quote gating and the admin counters
all go through these functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping

from app.core.clock import ensure_timezone
from app.models import Professional

RATING_WEIGHT = 5
JOBS_WEIGHT = 2
RECENT_ACTIVITY_DAYS = 7
RECENT_ACTIVITY_BONUS = 3
WARM_ACTIVITY_DAYS = 15
WARM_ACTIVITY_BONUS = 2
COMPLETE_PROFILE_BONUS = 5
FEATURED_BONUS = 1000


@dataclass(frozen=True)
class RankingResult:
    score: float
    featured_active: bool


def is_featured_active(professional: Professional, now: datetime) -> bool:
    """A promotion is active while ``featuredUntil`` is strictly in the future."""
    if not professional.is_featured or professional.featured_until is None:
        return False
    return ensure_timezone(professional.featured_until) > ensure_timezone(now)


def _activity_bonus(last_active: datetime | None, now: datetime) -> int:
    if last_active is None:
        return 0
    days_since = (ensure_timezone(now) - ensure_timezone(last_active)) // timedelta(days=1)
    if days_since <= RECENT_ACTIVITY_DAYS:
        return RECENT_ACTIVITY_BONUS
    if days_since <= WARM_ACTIVITY_DAYS:
        return WARM_ACTIVITY_BONUS
    return 0


def score_professional(professional: Professional, now: datetime) -> RankingResult:
    score = professional.rating * RATING_WEIGHT + professional.jobs_completed * JOBS_WEIGHT
    score += _activity_bonus(professional.last_active, now)
    if professional.profile_completed:
        score += COMPLETE_PROFILE_BONUS

    featured_active = is_featured_active(professional, now)
    if featured_active:
        score += FEATURED_BONUS
    return RankingResult(score=score, featured_active=featured_active)


def is_profile_complete(document: Mapping[str, Any]) -> bool:
    """Completeness over a stored professional document (camelCase keys)."""
    return bool(
        document.get("name")
        and document.get("phone")
        and document.get("photoUrl")
        and document.get("rubros")
        and document.get("zonas")
    )


__all__ = [
    "FEATURED_BONUS",
    "RankingResult",
    "is_featured_active",
    "is_profile_complete",
    "score_professional",
]
