"""API routes for banner rotation and click tracking."""

import random
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.clock import Clock
from app.dependencies import get_clock, get_document_store, get_random
from app.repository import DocumentStore
from app.schemas import (
    BannerResponse,
    BannerSelectionResponse,
    TrackClickRequest,
    TrackClickResponse,
)
from app.services import BannerService

router = APIRouter(tags=["banners"])


@router.get("/banners", response_model=BannerSelectionResponse)
def select_banner(
    rubro: Optional[str] = Query(None),
    city: Optional[str] = Query(None),
    position: Optional[str] = Query(None),
    store: DocumentStore = Depends(get_document_store),
    clock: Clock = Depends(get_clock),
    rng: random.Random = Depends(get_random),
):
    service = BannerService(store, clock=clock, rng=rng)
    banner = service.select_banner(rubro=rubro, city=city, position=position)
    return BannerSelectionResponse(
        banner=BannerResponse.from_banner(banner) if banner else None
    )


@router.post("/trackClick", response_model=TrackClickResponse)
def track_click(
    payload: TrackClickRequest,
    store: DocumentStore = Depends(get_document_store),
    clock: Clock = Depends(get_clock),
):
    service = BannerService(store, clock=clock)
    service.track_click(payload.banner_id, payload.city)
    return TrackClickResponse()


__all__ = ["router"]
