"""Shared fixtures: an in-memory chirp store and app clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from chirpy.core.errors import NotFound, StorageFailure
from chirpy.core.settings import Settings
from chirpy.main import create_app


@dataclass
class FakeUser:
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str


@dataclass
class FakeChirp:
    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: Optional[UUID] = None


@dataclass
class MemoryStore:
    users: list = field(default_factory=list)
    chirps: list = field(default_factory=list)
    calls: list = field(default_factory=list)
    fail: bool = False

    def _tick(self) -> datetime:
        # Strictly increasing timestamps keep creation order observable.
        return datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=len(self.calls))

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise StorageFailure(f"{name} failed")

    async def create_user(self, email: str) -> FakeUser:
        self._enter("create_user")
        if any(u.email == email for u in self.users):
            raise StorageFailure("error while creating a user: duplicate email")
        now = self._tick()
        user = FakeUser(id=uuid4(), created_at=now, updated_at=now, email=email)
        self.users.append(user)
        return user

    async def create_chirp(self, body: str, user_id: Optional[UUID]) -> FakeChirp:
        self._enter("create_chirp")
        now = self._tick()
        chirp = FakeChirp(id=uuid4(), created_at=now, updated_at=now, body=body, user_id=user_id)
        self.chirps.append(chirp)
        return chirp

    async def list_chirps(self) -> list:
        self._enter("list_chirps")
        return list(self.chirps)

    async def get_chirp(self, chirp_id: UUID) -> FakeChirp:
        self._enter("get_chirp")
        for chirp in self.chirps:
            if chirp.id == chirp_id:
                return chirp
        raise NotFound("Chirp not found")

    async def delete_users(self) -> None:
        self._enter("delete_users")
        owners = {u.id for u in self.users}
        self.chirps = [c for c in self.chirps if c.user_id not in owners]
        self.users = []


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def static_root(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>Welcome to Chirpy</body></html>")
    (tmp_path / "logo.png").write_bytes(b"\x89PNG")
    return tmp_path


def _client(store, static_root, platform):
    settings = Settings(platform=platform, filepath_root=str(static_root))
    return TestClient(create_app(settings=settings, store=store))


@pytest.fixture
def client(store, static_root):
    with _client(store, static_root, "dev") as c:
        yield c


@pytest.fixture
def prod_client(store, static_root):
    with _client(store, static_root, "prod") as c:
        yield c
