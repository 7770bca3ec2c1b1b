from __future__ import annotations
from fastapi import APIRouter, Depends

from chirpy.api.deps import get_store
from chirpy.api.schemas import UserCreateIn, UserOut
from chirpy.core.errors import respond_with_json
from chirpy.services.store import ChirpStore

router = APIRouter(prefix="/api", tags=["users"])

@router.post("/users", response_model=UserOut, status_code=201)
async def create_user(data: UserCreateIn, store: ChirpStore = Depends(get_store)):
    user = await store.create_user(data.email)
    return respond_with_json(201, UserOut.model_validate(user))
