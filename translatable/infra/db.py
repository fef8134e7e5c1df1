from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ..core.config import settings
from .repos import ArticlesRepo

log = logging.getLogger(__name__)


class Database:
    """Async engine and sessions for the articles store."""

    def __init__(self, url: Optional[str] = None) -> None:
        self.url = make_url(url or settings.DATABASE_URL)
        self.engine: Optional[AsyncEngine] = None
        self.sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_sqlite_file(self) -> bool:
        return self.url.get_backend_name() == "sqlite" and self.url.database not in (None, "", ":memory:")

    async def connect(self) -> "Database":
        if self.engine is not None:
            return self
        if self.is_sqlite_file:
            Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)
        self.engine = create_async_engine(self.url, echo=False)
        self.sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)
        if self.is_sqlite_file:
            async with self.engine.begin() as conn:
                await conn.exec_driver_sql("PRAGMA journal_mode=WAL;")
                await conn.exec_driver_sql("PRAGMA foreign_keys=ON;")
        log.debug("Connected to %s", self.url.render_as_string(hide_password=True))
        return self

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Session committed on success and rolled back on error."""
        assert self.sessionmaker is not None, "Database not connected"
        async with self.sessionmaker() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    @asynccontextmanager
    async def articles(self) -> AsyncIterator[ArticlesRepo]:
        async with self.session() as s:
            yield ArticlesRepo(s)

    async def dispose(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
        self.engine = None
        self.sessionmaker = None
