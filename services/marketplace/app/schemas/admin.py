"""Pydantic schemas for the admin dashboard."""

from __future__ import annotations

from app.schemas.base import CamelModel


class AdminStatsResponse(CamelModel):
    success: bool = True
    total_professionals: int
    featured_active_count: int
    total_quotes: int
    total_clicks: int
