import logging
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()

POOL_SIZE = 5


class Database:
    """
    Connection pool for the relational store.

    Built once per process and kept on ``app.state.database``. Requests borrow
    one session (and through it one pooled connection) for their lifetime.
    When every connection is checked out, new requests wait for a release
    without a timeout.
    """

    def __init__(self, url: Optional[str]) -> None:
        if not url:
            raise RuntimeError("DATABASE_URL must be set")

        engine_kwargs: Dict[str, Any] = {"future": True}
        # SQLite dialects pick their own pool (NullPool/StaticPool) which
        # rejects sizing arguments.
        if not url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=POOL_SIZE,
                max_overflow=0,
                pool_timeout=None,
                pool_pre_ping=True,
            )

        self.engine = create_async_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        # import models so their tables are registered on Base.metadata
        from todo_api.models import auth, todo  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    def session(self) -> AsyncSession:
        return self.session_factory()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
