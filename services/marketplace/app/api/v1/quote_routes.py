"""API routes for quote operations."""

from fastapi import APIRouter, Depends

from app.core.clock import Clock
from app.dependencies import get_clock, get_document_store, get_guard
from app.repository import DocumentStore
from app.schemas import CreateQuoteRequest, CreateQuoteResponse
from app.services import AuthorizationGuard, QuoteService

router = APIRouter(tags=["quotes"])


@router.post("/createQuote", response_model=CreateQuoteResponse)
def create_quote(
    payload: CreateQuoteRequest,
    store: DocumentStore = Depends(get_document_store),
    guard: AuthorizationGuard = Depends(get_guard),
    clock: Clock = Depends(get_clock),
):
    service = QuoteService(store, guard, clock=clock)
    quote_id = service.create_quote(
        professional_id=payload.professional_id,
        client_name=payload.client_name,
        client_phone=payload.client_phone,
        items=payload.items,
        total=payload.total,
        auth_token=payload.auth_token,
    )
    return CreateQuoteResponse(quote_id=quote_id)


__all__ = ["router"]
