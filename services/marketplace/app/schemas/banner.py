"""Pydantic schemas for banners and click tracking."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict

from app.models import Banner
from app.schemas.base import CamelModel


class BannerResponse(CamelModel):
    # Presentation fields (image, link, ...) are passed through as-is.
    model_config = ConfigDict(extra="allow")

    id: str
    active: bool
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    city: Optional[str] = None
    position: Optional[str] = None
    rubros: List[str] = []

    @classmethod
    def from_banner(cls, banner: Banner) -> "BannerResponse":
        return cls(
            **banner.extra,
            id=banner.id,
            active=banner.active,
            start_date=banner.start_date,
            end_date=banner.end_date,
            city=banner.city,
            position=banner.position,
            rubros=banner.rubros or [],
        )


class BannerSelectionResponse(CamelModel):
    success: bool = True
    banner: Optional[BannerResponse] = None


class TrackClickRequest(CamelModel):
    banner_id: Optional[str] = None
    city: Optional[str] = None


class TrackClickResponse(CamelModel):
    success: bool = True
