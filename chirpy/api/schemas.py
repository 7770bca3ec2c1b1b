from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from typing import Optional
from uuid import UUID
from datetime import datetime

# Unknown request fields are ignored.

class UserCreateIn(BaseModel):
    model_config = ConfigDict(extra="ignore")
    email: str

class ChirpCreateIn(BaseModel):
    model_config = ConfigDict(extra="ignore")
    body: str
    user_id: Optional[UUID] = None

class ChirpValidateIn(BaseModel):
    model_config = ConfigDict(extra="ignore")
    body: str

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str

class ChirpOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: Optional[UUID] = None

class CleanedBodyOut(BaseModel):
    cleaned_body: str
