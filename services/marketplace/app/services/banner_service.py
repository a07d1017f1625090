"""Banner rotation and click tracking."""

from __future__ import annotations

import logging
import random
from typing import Optional

from app.core.clock import Clock, utc_now
from app.core.config import settings
from app.core.errors import InvalidArgument, NotFound
from app.models import Banner, ClickEvent
from app.repository import DocumentStore, create_click, get_banner, list_started_banners

logger = logging.getLogger(__name__)


class BannerService:
    """Picks an eligible banner at random and records clicks on banners."""

    def __init__(
        self,
        store: DocumentStore,
        *,
        clock: Clock = utc_now,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._rng = rng or random.Random()

    def list_eligible_banners(
        self,
        *,
        rubro: Optional[str] = None,
        city: Optional[str] = None,
        position: Optional[str] = None,
    ) -> list[Banner]:
        now = self._clock()
        banners = list_started_banners(self._store, now=now, city=city, position=position)
        return [
            banner
            for banner in banners
            if banner.is_live(now)
            and (not rubro or banner.matches_rubro(rubro, settings.ALL_RUBROS_TAG))
        ]

    def select_banner(
        self,
        *,
        rubro: Optional[str] = None,
        city: Optional[str] = None,
        position: Optional[str] = None,
    ) -> Optional[Banner]:
        eligible = self.list_eligible_banners(rubro=rubro, city=city, position=position)
        if not eligible:
            return None
        return self._rng.choice(eligible)

    def track_click(self, banner_id: Optional[str], city: Optional[str] = None) -> str:
        if not banner_id:
            raise InvalidArgument("bannerId is required")
        if get_banner(self._store, banner_id) is None:
            raise NotFound("Banner not found")

        click = ClickEvent(
            banner_id=banner_id,
            city=city or settings.DEFAULT_CLICK_CITY,
            timestamp=self._clock(),
        )
        click_id = create_click(self._store, click)
        logger.debug("Recorded click %s on banner %s", click_id, banner_id)
        return click_id


__all__ = ["BannerService"]
