"""Quote issuance for featured professionals."""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional, Union

from app.core.clock import Clock, utc_now
from app.core.errors import Forbidden, InvalidArgument
from app.models import Quote
from app.repository import DocumentStore, create_quote, get_professional
from app.services.authorization import AuthorizationGuard
from app.services.ranking import is_featured_active

logger = logging.getLogger(__name__)


def parse_items(items: Union[List[str], str, None]) -> List[str]:
    """Accept a list of lines or one newline-delimited string; blank lines are dropped."""
    if isinstance(items, str):
        return [line.strip() for line in items.split("\n") if line.strip()]
    if isinstance(items, list) and all(isinstance(item, str) for item in items):
        return list(items)
    raise InvalidArgument("items must be a list of strings or a newline-separated text")


def parse_total(total: Any) -> Decimal:
    if isinstance(total, bool):
        raise InvalidArgument("total must be a non-negative number")
    try:
        amount = Decimal(str(total).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidArgument("total must be a non-negative number") from exc
    if not amount.is_finite() or amount < 0:
        raise InvalidArgument("total must be a non-negative number")
    if math.isinf(float(amount)):
        raise InvalidArgument("total is too large")
    return amount


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list)):
        return len(value) == 0
    return False


class QuoteService:
    """Service layer encapsulating quote operations."""

    def __init__(
        self,
        store: DocumentStore,
        guard: AuthorizationGuard,
        *,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._guard = guard
        self._clock = clock

    def create_quote(
        self,
        *,
        professional_id: Optional[str],
        client_name: Optional[str],
        client_phone: Optional[str],
        items: Union[List[str], str, None],
        total: Any,
        auth_token: Optional[str],
    ) -> str:
        required = (professional_id, client_name, client_phone, items, total)
        if any(_is_missing(value) for value in required):
            raise InvalidArgument("Missing required fields")

        user_id = self._guard.require_auth(auth_token)
        professional = get_professional(self._store, professional_id)
        self._guard.require_ownership(
            professional, user_id, not_found_message="Professional not found"
        )

        now = self._clock()
        if not is_featured_active(professional, now):
            logger.warning("Quote rejected for %s: featured promotion is not active", professional_id)
            raise Forbidden("Only featured professionals may issue quotes")

        parsed_items = parse_items(items)
        if not parsed_items:
            raise InvalidArgument("items must contain at least one line")
        amount = parse_total(total)

        quote = Quote(
            professional_id=professional_id,
            client_name=client_name,
            client_phone=client_phone,
            items=parsed_items,
            total=float(amount),
            created_at=now,
        )
        quote_id = create_quote(self._store, quote)
        logger.info("Professional %s created quote %s", professional_id, quote_id)
        return quote_id


__all__ = ["QuoteService", "parse_items", "parse_total"]
