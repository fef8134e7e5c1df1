from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

from .config import Settings


@dataclass
class LocaleContext:
    """Current locale plus the optional fallback consulted on missing translations."""

    locale: str = "en"
    fallback_locale: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "LocaleContext":
        return cls(locale=settings.APP_LOCALE, fallback_locale=settings.FALLBACK_LOCALE)

    def with_fallback(self, fallback_locale: Optional[str]) -> "LocaleContext":
        return replace(self, fallback_locale=fallback_locale)

    @contextmanager
    def using(self, locale: str) -> Iterator["LocaleContext"]:
        """Temporarily switch the current locale."""
        previous = self.locale
        self.locale = locale
        try:
            yield self
        finally:
            self.locale = previous
