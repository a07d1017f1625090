"""Pydantic schemas for professional resources."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import EmailStr, Field, StringConstraints

from app.schemas.base import CamelModel

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=200),
]
PhoneStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=30),
]


class RegisterRequest(CamelModel):
    email: EmailStr
    password: Annotated[str, StringConstraints(min_length=1, max_length=128)]
    name: NameStr
    phone: PhoneStr


class RegisterResponse(CamelModel):
    success: bool = True
    user_id: str
    message: str = "Professional registered successfully"


class ProfessionalResponse(CamelModel):
    id: str
    user_id: str
    email: str
    name: str
    phone: str
    photo_url: str
    rubros: List[str]
    zonas: List[str]
    rating: float
    reviews_count: int
    jobs_completed: int
    last_active: Optional[datetime] = None
    profile_completed: bool
    is_featured: bool
    featured_until: Optional[datetime] = None
    ranking_score: float
    is_featured_active: bool
    blocked: bool
    created_at: Optional[datetime] = None


class ProfessionalSearchResponse(CamelModel):
    success: bool = True
    professionals: List[ProfessionalResponse]


class ProfessionalUpdate(CamelModel):
    """Fields a professional may edit; anything else in the payload is dropped."""

    name: Optional[str] = None
    phone: Optional[str] = None
    photo_url: Optional[str] = None
    rubros: Optional[List[str]] = None
    zonas: Optional[List[str]] = None


class UpdateProfessionalRequest(CamelModel):
    professional_id: Optional[str] = None
    updates: ProfessionalUpdate = Field(default_factory=ProfessionalUpdate)
    auth_token: Optional[str] = None


class UpdateProfessionalResponse(CamelModel):
    success: bool = True
    profile_completed: bool
    message: str = "Profile updated successfully"
