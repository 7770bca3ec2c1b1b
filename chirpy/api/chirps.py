from __future__ import annotations
from fastapi import APIRouter, Depends
from uuid import UUID

from chirpy.api.deps import get_store
from chirpy.api.schemas import ChirpCreateIn, ChirpOut, ChirpValidateIn, CleanedBodyOut
from chirpy.core.errors import respond_with_json
from chirpy.services.moderation import validate
from chirpy.services.store import ChirpStore

router = APIRouter(prefix="/api", tags=["chirps"])

@router.post("/chirps", response_model=ChirpOut, status_code=201)
async def create_chirp(data: ChirpCreateIn, store: ChirpStore = Depends(get_store)):
    # Stored as written; filtering only applies to /validate_chirp.
    checked = validate(data.body)
    chirp = await store.create_chirp(checked.body, data.user_id)
    return respond_with_json(201, ChirpOut.model_validate(chirp))

@router.post("/validate_chirp", response_model=CleanedBodyOut)
async def validate_chirp(data: ChirpValidateIn):
    checked = validate(data.body)
    return respond_with_json(200, CleanedBodyOut(cleaned_body=checked.cleaned))

@router.get("/chirps", response_model=list[ChirpOut])
async def list_chirps(store: ChirpStore = Depends(get_store)):
    chirps = await store.list_chirps()
    return respond_with_json(200, [ChirpOut.model_validate(c) for c in chirps])

@router.get("/chirps/{chirp_id}", response_model=ChirpOut)
async def get_chirp(chirp_id: UUID, store: ChirpStore = Depends(get_store)):
    chirp = await store.get_chirp(chirp_id)
    return respond_with_json(200, ChirpOut.model_validate(chirp))
