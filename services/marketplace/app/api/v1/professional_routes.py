"""API routes for registration, search and profile updates."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.clock import Clock
from app.dependencies import get_clock, get_document_store, get_guard, get_identity_service
from app.repository import DocumentStore
from app.schemas import (
    ProfessionalSearchResponse,
    RegisterRequest,
    RegisterResponse,
    UpdateProfessionalRequest,
    UpdateProfessionalResponse,
)
from app.services import AuthorizationGuard, IdentityService, ProfessionalService

router = APIRouter(tags=["professionals"])


@router.post("/register", response_model=RegisterResponse)
def register(
    payload: RegisterRequest,
    store: DocumentStore = Depends(get_document_store),
    identity: IdentityService = Depends(get_identity_service),
    clock: Clock = Depends(get_clock),
):
    service = ProfessionalService(store, identity=identity, clock=clock)
    user_id = service.register(str(payload.email), payload.password, payload.name, payload.phone)
    return RegisterResponse(user_id=user_id)


@router.get("/professionals", response_model=ProfessionalSearchResponse)
def search_professionals(
    rubro: Optional[str] = Query(None),
    zona: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: DocumentStore = Depends(get_document_store),
    clock: Clock = Depends(get_clock),
):
    service = ProfessionalService(store, clock=clock)
    ranked = service.search(rubro, zona, limit)
    return ProfessionalSearchResponse(professionals=[item.to_response() for item in ranked])


@router.post("/updateProfessional", response_model=UpdateProfessionalResponse)
def update_professional(
    payload: UpdateProfessionalRequest,
    store: DocumentStore = Depends(get_document_store),
    guard: AuthorizationGuard = Depends(get_guard),
    clock: Clock = Depends(get_clock),
):
    service = ProfessionalService(store, guard=guard, clock=clock)
    profile_completed = service.update_professional(
        payload.professional_id, payload.updates, payload.auth_token
    )
    return UpdateProfessionalResponse(profile_completed=profile_completed)


__all__ = ["router"]
