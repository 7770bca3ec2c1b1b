from __future__ import annotations

import asyncio

from alembic import context
from sqlalchemy.engine import Connection

from chirpy.core.settings import Settings
from chirpy.db.base import Base
from chirpy.db.session import make_engine
import chirpy.models  # noqa: F401  registers tables on Base.metadata

config = context.config
target_metadata = Base.metadata
db_url = config.get_main_option("sqlalchemy.url") or Settings().db_url


def run_migrations_offline() -> None:
    context.configure(url=db_url, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = make_engine(db_url)
    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
