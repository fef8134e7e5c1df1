from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, Set

from .errors import CorruptTranslationDataError, UntranslatableAttributeError
from .events import TranslationEvents, TranslationHasBeenSet, default_events
from .locale import LocaleContext


log = logging.getLogger(__name__)


class TranslatableEntity(Protocol):
    def get_translatable_attributes(self) -> Iterable[str]: ...

    def get_raw_attribute(self, key: str) -> Any: ...

    def set_raw_attribute(self, key: str, raw: str) -> None: ...

    def has_get_mutator(self, key: str) -> bool: ...

    def mutate_attribute(self, key: str, value: Any) -> Any: ...

    def has_set_mutator(self, key: str) -> bool: ...

    def mutate_set_attribute(self, key: str, value: Any) -> Any: ...


def encode_translations(translations: Mapping[str, Any]) -> str:
    return json.dumps(dict(translations), ensure_ascii=False, separators=(",", ":"))


def decode_translations(key: str, raw: Any) -> Dict[str, Any]:
    # Missing or empty slots hold no translations yet
    if raw is None or raw == "":
        return {}
    if not isinstance(raw, (str, bytes, bytearray)):
        raise CorruptTranslationDataError(key, raw, f"expected a JSON string, got {type(raw).__name__}")
    try:
        decoded = json.loads(raw)
    except ValueError as e:
        raise CorruptTranslationDataError(key, raw, f"invalid JSON ({e})") from e
    if not isinstance(decoded, dict):
        raise CorruptTranslationDataError(key, raw, f"expected a JSON object, got {type(decoded).__name__}")
    return decoded


class LocalizedAttributeStore:
    """Per-locale values for the translatable attributes of one entity.

    Each translatable attribute keeps a JSON object (locale -> value) in its
    own slot on the entity. Nothing is cached: every read decodes the slot
    as it is right now, every write re-encodes it.
    """

    def __init__(
        self,
        entity: TranslatableEntity,
        context: LocaleContext,
        events: Optional[TranslationEvents] = None,
        strict: bool = True,
    ) -> None:
        self.entity = entity
        self.context = context
        self.events = events if events is not None else default_events
        self.strict = strict

    def is_translatable(self, key: str) -> bool:
        return key in self.entity.get_translatable_attributes()

    def guard(self, key: str) -> None:
        if not self.is_translatable(key):
            raise UntranslatableAttributeError(key, self.entity.get_translatable_attributes())

    # Reads

    def get_translations(self, key: str) -> Dict[str, Any]:
        self.guard(key)
        return self._decode(key, self.entity.get_raw_attribute(key))

    def get_translated_locales(self, key: str) -> Set[str]:
        return set(self.get_translations(key))

    def normalize_locale(self, key: str, locale: str, use_fallback: bool = True) -> str:
        if not use_fallback or locale in self.get_translated_locales(key):
            return locale
        fallback = self.context.fallback_locale
        return locale if fallback is None else fallback

    def get_translation(self, key: str, locale: str, use_fallback: bool = True) -> Any:
        locale = self.normalize_locale(key, locale, use_fallback)
        translation = self.get_translations(key).get(locale, "")
        if self.entity.has_get_mutator(key):
            return self.entity.mutate_attribute(key, translation)
        return translation

    def trans(self, key: str, locale: Optional[str] = None) -> Any:
        return self.get_translation(key, locale or self.context.locale)

    # Writes

    def set_translation(self, key: str, locale: str, value: Any) -> TranslatableEntity:
        self.guard(key)
        translations = self.get_translations(key)
        old_value = translations.get(locale, "")

        if self.entity.has_set_mutator(key):
            value = self.entity.mutate_set_attribute(key, value)

        translations[locale] = value
        self.entity.set_raw_attribute(key, encode_translations(translations))
        log.debug("Stored %s[%s] on %s", key, locale, type(self.entity).__name__)

        self.events.dispatch(TranslationHasBeenSet(self.entity, key, locale, old_value, value))
        return self.entity

    def set_translations(self, key: str, translations: Mapping[str, Any]) -> TranslatableEntity:
        self.guard(key)
        for locale, translation in translations.items():
            self.set_translation(key, locale, translation)
        return self.entity

    def forget_translation(self, key: str, locale: str) -> TranslatableEntity:
        remaining = self._without_locale(key, self.get_translations(key), locale)
        self.entity.set_raw_attribute(key, encode_translations(remaining))
        log.debug("Forgot %s[%s] on %s", key, locale, type(self.entity).__name__)
        return self.entity

    def flush_translations(self, locale: str) -> TranslatableEntity:
        # Decode and mutate every slot before writing any of them back
        keys = tuple(self.entity.get_translatable_attributes())
        decoded = {key: self.get_translations(key) for key in keys}
        remaining = {key: self._without_locale(key, decoded[key], locale) for key in keys}
        for key in keys:
            self.entity.set_raw_attribute(key, encode_translations(remaining[key]))
        log.debug("Flushed %s from %d attributes on %s", locale, len(keys), type(self.entity).__name__)
        return self.entity

    def _without_locale(self, key: str, translations: Dict[str, Any], locale: str) -> Dict[str, Any]:
        translations.pop(locale, None)
        if self.entity.has_set_mutator(key):
            # Surviving values go through the set mutator again
            return {
                code: self.entity.mutate_set_attribute(key, value)
                for code, value in translations.items()
            }
        return translations

    def _decode(self, key: str, raw: Any) -> Dict[str, Any]:
        try:
            return decode_translations(key, raw)
        except CorruptTranslationDataError as e:
            if self.strict:
                raise
            log.warning("Treating stored translations for %s as empty: %s", key, e.reason)
            return {}
