from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Set, Tuple

from .config import settings
from .events import TranslationEvents, default_events
from .locale import LocaleContext
from .mutators import collect_mutators
from .store import LocalizedAttributeStore


class HasTranslations:
    """Mixin giving a model per-locale values for the attributes in ``__translatable__``.

    Each translatable attribute is a plain (usually Text) column holding the
    JSON-encoded locale -> value mapping. Put the mixin before the declarative
    base so ``get_casts`` can extend the model's own casts.
    """

    __translatable__ = ()

    # Per-class or per-instance overrides; None means "use the defaults"
    translation_context = None
    translation_events = None
    strict_translations = True

    _translation_getters = {}
    _translation_setters = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        declared = cls.__translatable__
        if isinstance(declared, str) or not all(isinstance(key, str) for key in declared):
            raise TypeError(
                f"{cls.__name__}.__translatable__ must be a sequence of attribute names, got {declared!r}"
            )
        cls._translation_getters, cls._translation_setters = collect_mutators(cls)
        super().__init_subclass__(**kwargs)

    # Host hooks

    def get_translatable_attributes(self) -> Tuple[str, ...]:
        return tuple(self.__translatable__)

    def get_raw_attribute(self, key: str) -> Any:
        return getattr(self, key, None)

    def set_raw_attribute(self, key: str, raw: str) -> None:
        setattr(self, key, raw)

    def has_get_mutator(self, key: str) -> bool:
        return key in self._translation_getters

    def mutate_attribute(self, key: str, value: Any) -> Any:
        return self._translation_getters[key](self, value)

    def has_set_mutator(self, key: str) -> bool:
        return key in self._translation_setters

    def mutate_set_attribute(self, key: str, value: Any) -> Any:
        return self._translation_setters[key](self, value)

    def get_locale_context(self) -> LocaleContext:
        if self.translation_context is not None:
            return self.translation_context
        return LocaleContext.from_settings(settings)

    def get_translation_events(self) -> TranslationEvents:
        if self.translation_events is not None:
            return self.translation_events
        return default_events

    def translations(self) -> LocalizedAttributeStore:
        return LocalizedAttributeStore(
            self,
            self.get_locale_context(),
            events=self.get_translation_events(),
            strict=self.strict_translations,
        )

    # Translation API

    def is_translatable_attribute(self, key: str) -> bool:
        return self.translations().is_translatable(key)

    def get_attribute_value(self, key: str) -> Any:
        store = self.translations()
        if store.is_translatable(key):
            return store.get_translation(key, store.context.locale)
        value = self.get_raw_attribute(key)
        return self.mutate_attribute(key, value) if self.has_get_mutator(key) else value

    def trans(self, key: str, locale: Optional[str] = None) -> Any:
        return self.translations().trans(key, locale)

    def get_translation(self, key: str, locale: str, use_fallback: bool = True) -> Any:
        return self.translations().get_translation(key, locale, use_fallback)

    def get_translations(self, key: str) -> Dict[str, Any]:
        return self.translations().get_translations(key)

    def get_translated_locales(self, key: str) -> Set[str]:
        return self.translations().get_translated_locales(key)

    def set_translation(self, key: str, locale: str, value: Any):
        self.translations().set_translation(key, locale, value)
        return self

    def set_translations(self, key: str, translations: Mapping[str, Any]):
        self.translations().set_translations(key, translations)
        return self

    def forget_translation(self, key: str, locale: str):
        self.translations().forget_translation(key, locale)
        return self

    def flush_translations(self, locale: str):
        self.translations().flush_translations(locale)
        return self

    def cast_attribute(self, key: str, cast: Optional[str]) -> Any:
        # Exported through the store so corrupt slots follow strict_translations
        if key in self.get_translatable_attributes():
            return self.get_translations(key)
        parent = getattr(super(), "cast_attribute", None)
        return parent(key, cast) if parent is not None else self.get_raw_attribute(key)

    def get_casts(self) -> Dict[str, str]:
        parent = getattr(super(), "get_casts", None)
        casts = dict(parent()) if parent is not None else dict(getattr(self, "__casts__", {}))
        casts.update(dict.fromkeys(self.get_translatable_attributes(), "array"))
        return casts
