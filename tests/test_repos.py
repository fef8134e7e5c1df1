from __future__ import annotations

import pytest
import pytest_asyncio

from translatable.infra.db import Database
from translatable.infra.migrate import migrate
from translatable.infra.models import Article
from translatable.infra.repos import ArticlesRepo


@pytest_asyncio.fixture
async def database(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'data' / 'test.db'}")
    await migrate(database)
    yield database
    await database.dispose()


@pytest.mark.asyncio
async def test_connect_creates_sqlite_directory(tmp_path, database):
    assert database.is_sqlite_file
    assert (tmp_path / "data" / "test.db").exists()
    # Connecting twice keeps the same engine
    engine = database.engine
    await database.connect()
    assert database.engine is engine


@pytest.mark.asyncio
async def test_session_requires_connect():
    with pytest.raises(AssertionError):
        async with Database("sqlite+aiosqlite:///:memory:").session():
            pass


@pytest.mark.asyncio
async def test_upsert_persists_translations(database):
    async with database.articles() as repo:
        await repo.upsert("welcome", {"title": {"en": " Welcome ", "fr": "Bienvenue"}})

    async with database.articles() as repo:
        article = await repo.get_by_slug("welcome")
        assert article is not None
        assert article.get_translations("title") == {"en": "Welcome", "fr": "Bienvenue"}
        assert article.get_translations("body") == {}
        assert article.created_at is not None


@pytest.mark.asyncio
async def test_failed_block_rolls_back(database):
    with pytest.raises(RuntimeError):
        async with database.articles() as repo:
            await repo.upsert("draft", {"title": {"en": "Draft"}})
            raise RuntimeError("abort")

    async with database.articles() as repo:
        assert await repo.get_by_slug("draft") is None


@pytest.mark.asyncio
async def test_upsert_updates_existing_article(database):
    async with database.articles() as repo:
        first = await repo.upsert("about", {"title": {"en": "About"}})
        await repo.upsert("about", {"title": {"fr": "À propos"}, "body": {"en": "Us"}})
        article_id = first.id

    async with database.articles() as repo:
        article = await repo.get(article_id)
        assert article.get_translations("title") == {"en": "About", "fr": "À propos"}
        assert article.get_translation("body", "en") == "Us"


@pytest.mark.asyncio
async def test_in_place_edit_is_saved_on_commit(database):
    async with database.articles() as repo:
        await repo.upsert("news", {"title": {"en": "News"}})

    async with database.session() as s:
        article = await ArticlesRepo(s).get_by_slug("news")
        article.set_translation("title", "de", "Neuigkeiten")
        assert article in s.dirty

    async with database.articles() as repo:
        article = await repo.get_by_slug("news")
        assert article.get_translated_locales("title") == {"en", "de"}


@pytest.mark.asyncio
async def test_list_translated_and_flush_locale(database):
    async with database.articles() as repo:
        await repo.upsert("a", {"title": {"en": "A", "fr": "A-fr"}, "body": {"fr": "corps"}})
        await repo.upsert("b", {"title": {"en": "B"}})

        assert [a.slug for a in await repo.list_translated("title", "fr")] == ["a"]
        assert [a.slug for a in await repo.list_translated("title", "en")] == ["a", "b"]

        assert await repo.flush_locale("fr") == 2

    async with database.articles() as repo:
        assert await repo.list_translated("title", "fr") == []
        a = await repo.get_by_slug("a")
        assert a.get_translations("body") == {}
        assert isinstance(a, Article)
