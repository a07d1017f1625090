"""API routes for the admin dashboard."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.clock import Clock
from app.dependencies import get_clock, get_document_store, get_guard
from app.repository import DocumentStore
from app.schemas import AdminStatsResponse
from app.services import AdminService, AuthorizationGuard

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=AdminStatsResponse)
def get_stats(
    auth_token: Optional[str] = Query(None, alias="authToken"),
    store: DocumentStore = Depends(get_document_store),
    guard: AuthorizationGuard = Depends(get_guard),
    clock: Clock = Depends(get_clock),
):
    service = AdminService(store, guard, clock=clock)
    return service.get_stats(auth_token)


__all__ = ["router"]
