"""Quotes issued by featured professionals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List


class QuoteStatus(str, Enum):
    CREATED = "created"


@dataclass
class Quote:
    professional_id: str
    client_name: str
    client_phone: str
    total: float
    created_at: datetime
    items: List[str] = field(default_factory=list)
    status: QuoteStatus = QuoteStatus.CREATED

    def to_document(self) -> Dict[str, Any]:
        return {
            "professionalId": self.professional_id,
            "clientName": self.client_name,
            "clientPhone": self.client_phone,
            "items": list(self.items),
            "total": self.total,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
