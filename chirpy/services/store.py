from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol, Sequence
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from chirpy.core.errors import NotFound, StorageFailure
from chirpy.models import Chirp, User


class ChirpStore(Protocol):
    """Persistence used by the handlers.

    ``list_chirps`` yields chirps oldest first. ``get_chirp`` raises
    ``NotFound`` on a miss. Deleting users removes their chirps too.
    """

    async def create_user(self, email: str) -> User: ...

    async def create_chirp(self, body: str, user_id: UUID | None) -> Chirp: ...

    async def list_chirps(self) -> Sequence[Chirp]: ...

    async def get_chirp(self, chirp_id: UUID) -> Chirp: ...

    async def delete_users(self) -> None: ...


class SqlChirpStore:
    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession], engine: AsyncEngine | None = None) -> None:
        self._sessionmaker = sessionmaker
        self._engine = engine

    async def create_user(self, email: str) -> User:
        now = datetime.now(timezone.utc)
        user = User(id=uuid4(), created_at=now, updated_at=now, email=email)
        try:
            async with self._sessionmaker() as db:
                db.add(user)
                await db.commit()
        except SQLAlchemyError as exc:
            raise StorageFailure(f"error while creating a user: {exc}") from exc
        return user

    async def create_chirp(self, body: str, user_id: UUID | None) -> Chirp:
        now = datetime.now(timezone.utc)
        chirp = Chirp(id=uuid4(), created_at=now, updated_at=now, body=body, user_id=user_id)
        try:
            async with self._sessionmaker() as db:
                db.add(chirp)
                await db.commit()
        except SQLAlchemyError as exc:
            raise StorageFailure(f"error while creating a chirp: {exc}") from exc
        return chirp

    async def list_chirps(self) -> Sequence[Chirp]:
        try:
            async with self._sessionmaker() as db:
                res = await db.execute(select(Chirp).order_by(Chirp.created_at.asc()))
                return res.scalars().all()
        except SQLAlchemyError as exc:
            raise StorageFailure(f"error while listing chirps: {exc}") from exc

    async def get_chirp(self, chirp_id: UUID) -> Chirp:
        try:
            async with self._sessionmaker() as db:
                res = await db.execute(select(Chirp).where(Chirp.id == chirp_id))
                chirp = res.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise StorageFailure(f"error while finding a chirp: {exc}") from exc
        if chirp is None:
            raise NotFound("Chirp not found")
        return chirp

    async def delete_users(self) -> None:
        # chirps.user_id cascades on delete
        try:
            async with self._sessionmaker() as db:
                await db.execute(delete(User))
                await db.commit()
        except SQLAlchemyError as exc:
            raise StorageFailure(f"couldn't delete users: {exc}") from exc

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
