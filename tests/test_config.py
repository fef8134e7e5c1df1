from __future__ import annotations

import pytest

from translatable.core.config import Settings
from translatable.core.locale import LocaleContext


def test_defaults(monkeypatch):
    for name in ("APP_LOCALE", "FALLBACK_LOCALE", "DATABASE_URL", "LOG_LEVEL", "LOG_TO_FILE"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.APP_LOCALE == "en"
    assert s.FALLBACK_LOCALE == "en"
    assert s.DATABASE_URL.startswith("sqlite+aiosqlite://")
    assert s.LOG_LEVEL == "INFO"
    assert s.LOG_TO_FILE is False


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_fallback_disables_fallback(value):
    assert Settings(FALLBACK_LOCALE=value).FALLBACK_LOCALE is None


def test_values_are_normalized():
    s = Settings(APP_LOCALE=" fr ", FALLBACK_LOCALE=" en ", LOG_LEVEL="debug", LOG_TO_FILE="true")
    assert s.APP_LOCALE == "fr"
    assert s.FALLBACK_LOCALE == "en"
    assert s.LOG_LEVEL == "DEBUG"
    assert s.LOG_TO_FILE is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("APP_LOCALE", "de")
    monkeypatch.setenv("FALLBACK_LOCALE", "")
    s = Settings(_env_file=None)
    assert s.APP_LOCALE == "de"
    assert s.FALLBACK_LOCALE is None


def test_locale_context_from_settings():
    ctx = LocaleContext.from_settings(Settings(APP_LOCALE="fr", FALLBACK_LOCALE="en"))
    assert ctx == LocaleContext(locale="fr", fallback_locale="en")


def test_locale_context_using_restores_on_error():
    ctx = LocaleContext(locale="en")
    with pytest.raises(ValueError):
        with ctx.using("fr"):
            assert ctx.locale == "fr"
            raise ValueError
    assert ctx.locale == "en"


def test_with_fallback_returns_copy():
    ctx = LocaleContext(locale="en", fallback_locale=None)
    other = ctx.with_fallback("fr")
    assert other.fallback_locale == "fr"
    assert ctx.fallback_locale is None
