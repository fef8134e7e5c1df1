from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationHasBeenSet:
    entity: Any
    key: str
    locale: str
    old_value: Any
    new_value: Any


Listener = Callable[[TranslationHasBeenSet], None]


class TranslationEvents:
    """Synchronous observer list notified on every translation write."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def listen(self, callback: Listener) -> Listener:
        # Returns the callback so it can be used as a decorator
        if callback not in self._listeners:
            self._listeners.append(callback)
        return callback

    def forget(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def dispatch(self, event: TranslationHasBeenSet) -> None:
        log.debug(
            "Translation set: %s.%s[%s] (%d listeners)",
            type(event.entity).__name__, event.key, event.locale, len(self._listeners),
        )
        for listener in list(self._listeners):
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)


default_events = TranslationEvents()
