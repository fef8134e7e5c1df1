#!/usr/bin/env python3
from __future__ import annotations

import asyncio

from translatable.core.config import settings
from translatable.core.logging_config import setup_logging, get_logger
from translatable.infra.db import Database
from translatable.infra.migrate import migrate

log = get_logger(__name__)

SEED_ARTICLES = {
    "welcome": {
        "title": {"en": "Welcome", "fr": "Bienvenue", "es": "Bienvenido"},
        "body": {"en": "Hello there.", "fr": "Bonjour."},
    },
    "about": {
        "title": {"en": "About us", "fr": "À propos"},
        "body": {"en": "Who we are."},
    },
}


async def main() -> None:
    setup_logging(log_file=settings.LOG_TO_FILE, level=settings.LOG_LEVEL)

    database = Database(settings.DATABASE_URL)
    await migrate(database)
    async with database.articles() as repo:
        for slug, translations in SEED_ARTICLES.items():
            await repo.upsert(slug, translations)
    log.info("Seeded %d articles", len(SEED_ARTICLES))
    await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
