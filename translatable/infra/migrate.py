from __future__ import annotations

import logging

from .db import Database
from .models import Base

log = logging.getLogger(__name__)


async def migrate(database: Database) -> None:
    await database.connect()
    assert database.engine is not None
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("Schema ready (%d tables)", len(Base.metadata.tables))
