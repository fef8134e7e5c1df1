from __future__ import annotations

from typing import List

import pytest

from translatable.core.events import TranslationEvents, TranslationHasBeenSet
from translatable.core.locale import LocaleContext
from tests.factories import Post, ShoutingPost


@pytest.fixture
def context() -> LocaleContext:
    return LocaleContext(locale="en", fallback_locale="en")


@pytest.fixture
def events() -> TranslationEvents:
    return TranslationEvents()


@pytest.fixture
def received(events: TranslationEvents) -> List[TranslationHasBeenSet]:
    seen: List[TranslationHasBeenSet] = []
    events.listen(seen.append)
    return seen


def _bind(entity, context, events):
    entity.translation_context = context
    entity.translation_events = events
    return entity


@pytest.fixture
def post(context: LocaleContext, events: TranslationEvents) -> Post:
    return _bind(Post(), context, events)


@pytest.fixture
def shouting_post(context: LocaleContext, events: TranslationEvents) -> ShoutingPost:
    return _bind(ShoutingPost(), context, events)
