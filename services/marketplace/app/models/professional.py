"""Professional documents stored in the ``professionals`` collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.core.clock import ensure_timezone

# Fields a professional may change on their own profile.
EDITABLE_FIELDS = ("name", "phone", "photoUrl", "rubros", "zonas")


@dataclass
class Professional:
    """A registered professional as stored in the document store."""

    id: str
    user_id: str
    email: str = ""
    name: str = ""
    phone: str = ""
    photo_url: str = ""
    rubros: List[str] = field(default_factory=list)
    zonas: List[str] = field(default_factory=list)
    rating: float = 0
    reviews_count: int = 0
    jobs_completed: int = 0
    last_active: Optional[datetime] = None
    profile_completed: bool = False
    is_featured: bool = False
    featured_until: Optional[datetime] = None
    ranking_score: float = 0
    blocked: bool = False
    created_at: Optional[datetime] = None

    @property
    def owner_user_id(self) -> str:
        return self.user_id

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Professional":
        return cls(
            id=document["id"],
            user_id=document.get("userId") or document["id"],
            email=document.get("email") or "",
            name=document.get("name") or "",
            phone=document.get("phone") or "",
            photo_url=document.get("photoUrl") or "",
            rubros=list(document.get("rubros") or []),
            zonas=list(document.get("zonas") or []),
            rating=document.get("rating") or 0,
            reviews_count=document.get("reviewsCount") or 0,
            jobs_completed=document.get("jobsCompleted") or 0,
            last_active=ensure_timezone(document.get("lastActive")),
            profile_completed=bool(document.get("profileCompleted")),
            is_featured=bool(document.get("isFeatured")),
            featured_until=ensure_timezone(document.get("featuredUntil")),
            ranking_score=document.get("rankingScore") or 0,
            blocked=bool(document.get("blocked")),
            created_at=ensure_timezone(document.get("createdAt")),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
            "photoUrl": self.photo_url,
            "rubros": list(self.rubros),
            "zonas": list(self.zonas),
            "rating": self.rating,
            "reviewsCount": self.reviews_count,
            "jobsCompleted": self.jobs_completed,
            "lastActive": self.last_active,
            "profileCompleted": self.profile_completed,
            "isFeatured": self.is_featured,
            "featuredUntil": self.featured_until,
            "rankingScore": self.ranking_score,
            "blocked": self.blocked,
            "createdAt": self.created_at,
        }
