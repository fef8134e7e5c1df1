from __future__ import annotations

import logging
from typing import Mapping, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Article

log = logging.getLogger(__name__)


class ArticlesRepo:
    def __init__(self, session: AsyncSession) -> None:
        self.s = session

    async def get(self, article_id: int) -> Optional[Article]:
        return await self.s.get(Article, article_id)

    async def get_by_slug(self, slug: str) -> Optional[Article]:
        q = select(Article).where(Article.slug == slug)
        return (await self.s.execute(q)).scalars().first()

    async def upsert(self, slug: str, translations: Mapping[str, Mapping[str, str]]) -> Article:
        """Create or update an article, writing each ``{key: {locale: value}}`` entry."""
        article = await self.get_by_slug(slug)
        if article is None:
            article = Article(slug=slug)
            self.s.add(article)
        for key, values in translations.items():
            article.set_translations(key, values)
        await self.s.flush()
        return article

    async def list_translated(self, key: str, locale: str) -> list[Article]:
        # Translations live in JSON text, so locale filtering happens here
        rows = (await self.s.execute(select(Article).order_by(Article.id))).scalars().all()
        return [a for a in rows if locale in a.get_translated_locales(key)]

    async def flush_locale(self, locale: str) -> int:
        rows = (await self.s.execute(select(Article))).scalars().all()
        for article in rows:
            article.flush_translations(locale)
        await self.s.flush()
        log.info("Flushed locale %s from %d articles", locale, len(rows))
        return len(rows)
