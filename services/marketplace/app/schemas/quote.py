"""Pydantic schemas for quote resources."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from app.schemas.base import CamelModel


class CreateQuoteRequest(CamelModel):
    # Presence and format are checked by QuoteService so every violation maps to 400.
    professional_id: Optional[str] = None
    client_name: Optional[str] = None
    client_phone: Optional[str] = None
    items: Optional[Union[List[str], str]] = None
    total: Any = None
    auth_token: Optional[str] = None


class CreateQuoteResponse(CamelModel):
    success: bool = True
    quote_id: str
    message: str = "Quote created successfully"
