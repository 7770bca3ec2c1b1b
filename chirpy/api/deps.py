from __future__ import annotations
from fastapi import Request

from chirpy.core.counter import VisitCounter
from chirpy.core.errors import Forbidden
from chirpy.core.logging import log
from chirpy.core.settings import Settings
from chirpy.services.store import ChirpStore

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_counter(request: Request) -> VisitCounter:
    return request.app.state.counter

def get_store(request: Request) -> ChirpStore:
    return request.app.state.store

def require_dev(settings: Settings, action: str) -> None:
    if not settings.is_dev:
        log.warning("admin_forbidden", action=action, platform=settings.platform)
        raise Forbidden(f"{action} is only allowed in dev environment")
