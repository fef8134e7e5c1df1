"""Exceptions raised by translatable models."""

from __future__ import annotations

from typing import Any, Iterable


class TranslatableError(Exception):
    """Base class for every error raised by this package."""


class UntranslatableAttributeError(TranslatableError):
    """A translation operation was called with an attribute that isn't declared translatable."""

    def __init__(self, key: str, translatable: Iterable[str]) -> None:
        self.key = key
        self.translatable = tuple(translatable)
        allowed = ", ".join(self.translatable)
        super().__init__(
            f"The attribute `{key}` is untranslatable because it's not available "
            f"in the translatable attributes: `{allowed}`"
        )


class CorruptTranslationDataError(TranslatableError):
    """The backing slot of a translatable attribute doesn't hold a JSON object."""

    def __init__(self, key: str, raw: Any, reason: str) -> None:
        self.key = key
        self.raw = raw
        self.reason = reason
        super().__init__(f"Stored translations for `{key}` are corrupt: {reason}")
