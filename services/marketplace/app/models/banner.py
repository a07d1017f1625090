"""Advertising banners and the clicks they receive."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.core.clock import ensure_timezone

_KNOWN_FIELDS = {"id", "active", "startDate", "endDate", "city", "position", "rubros"}


@dataclass
class Banner:
    """A banner slot; presentation fields are kept verbatim in ``extra``."""

    id: str
    active: bool = False
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    city: Optional[str] = None
    position: Optional[str] = None
    rubros: Optional[List[str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Banner":
        return cls(
            id=document["id"],
            active=bool(document.get("active")),
            start_date=ensure_timezone(document.get("startDate")),
            end_date=ensure_timezone(document.get("endDate")),
            city=document.get("city"),
            position=document.get("position"),
            rubros=None if document.get("rubros") is None else list(document["rubros"]),
            extra={key: value for key, value in document.items() if key not in _KNOWN_FIELDS},
        )

    def is_live(self, now: datetime) -> bool:
        if not self.active or self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= now <= self.end_date

    def matches_rubro(self, rubro: str, wildcard: str) -> bool:
        # Untagged banners run for every category.
        if self.rubros is None:
            return True
        return wildcard in self.rubros or rubro in self.rubros


@dataclass
class ClickEvent:
    banner_id: str
    city: str
    timestamp: datetime

    def to_document(self) -> Dict[str, Any]:
        return {
            "bannerId": self.banner_id,
            "city": self.city,
            "timestamp": self.timestamp,
        }
