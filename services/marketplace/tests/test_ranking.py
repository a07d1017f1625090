from datetime import datetime, timedelta, timezone

import pytest

from app.models import Professional
from app.services.ranking import (
    FEATURED_BONUS,
    is_featured_active,
    is_profile_complete,
    score_professional,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _professional(**overrides) -> Professional:
    fields = {"id": "p1", "user_id": "p1"}
    fields.update(overrides)
    return Professional(**fields)


def test_reference_scenario_scores_48():
    professional = _professional(
        rating=4,
        jobs_completed=10,
        profile_completed=True,
        last_active=NOW - timedelta(days=3),
    )

    result = score_professional(professional, NOW)

    assert result.score == 48
    assert result.featured_active is False


def test_each_completed_job_adds_two_points():
    base = _professional(rating=3.5, jobs_completed=4, last_active=NOW - timedelta(days=10))
    bumped = _professional(rating=3.5, jobs_completed=5, last_active=NOW - timedelta(days=10))

    assert score_professional(bumped, NOW).score - score_professional(base, NOW).score == 2


@pytest.mark.parametrize(
    ("days_ago", "bonus"),
    [(0, 3), (7, 3), (8, 2), (15, 2), (16, 0), (120, 0)],
)
def test_recency_bonus_steps(days_ago, bonus):
    professional = _professional(last_active=NOW - timedelta(days=days_ago, hours=1))

    assert score_professional(professional, NOW).score == bonus


def test_missing_last_active_gets_no_recency_bonus():
    assert score_professional(_professional(), NOW).score == 0


def test_featured_window_boundaries():
    expired = _professional(is_featured=True, featured_until=NOW - timedelta(seconds=1))
    running = _professional(is_featured=True, featured_until=NOW + timedelta(seconds=1))
    exactly_now = _professional(is_featured=True, featured_until=NOW)

    assert is_featured_active(expired, NOW) is False
    assert is_featured_active(running, NOW) is True
    assert is_featured_active(exactly_now, NOW) is False


def test_featured_flag_without_end_date_is_inactive():
    professional = _professional(is_featured=True, featured_until=None)

    assert is_featured_active(professional, NOW) is False


def test_active_promotion_adds_dominating_bonus():
    professional = _professional(
        rating=1, is_featured=True, featured_until=NOW + timedelta(days=30)
    )

    result = score_professional(professional, NOW)

    assert result.featured_active is True
    assert result.score == 5 + FEATURED_BONUS


def test_naive_timestamps_are_read_as_utc():
    professional = _professional(
        is_featured=True, featured_until=datetime(2024, 5, 1, 12, 0, 1)
    )

    assert is_featured_active(professional, NOW) is True


def test_scoring_is_deterministic():
    professional = _professional(
        rating=4.2,
        jobs_completed=7,
        last_active=NOW - timedelta(days=12),
        profile_completed=True,
        is_featured=True,
        featured_until=NOW + timedelta(hours=2),
    )

    assert score_professional(professional, NOW) == score_professional(professional, NOW)


def test_profile_completeness_requires_every_core_field():
    complete = {
        "name": "Ana",
        "phone": "341-555-0101",
        "photoUrl": "https://cdn.example.com/ana.jpg",
        "rubros": ["electricidad"],
        "zonas": ["centro"],
    }

    assert is_profile_complete(complete) is True
    for key in complete:
        broken = dict(complete)
        broken[key] = [] if isinstance(complete[key], list) else ""
        assert is_profile_complete(broken) is False
