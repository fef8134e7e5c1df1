"""Decorators that register per-attribute value transforms on a model.

A get mutator receives the resolved translation and returns what callers
see; a set mutator receives an incoming value and returns what is stored.
Both are plain methods taking ``(self, value)``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

MUTATOR_MARKER = "__translation_mutator__"

Mutator = Callable[[Any, Any], Any]


def _mark(kind: str, key: str) -> Callable[[Mutator], Mutator]:
    def decorator(fn: Mutator) -> Mutator:
        setattr(fn, MUTATOR_MARKER, (kind, key))
        return fn
    return decorator


def get_mutator(key: str) -> Callable[[Mutator], Mutator]:
    return _mark("get", key)


def set_mutator(key: str) -> Callable[[Mutator], Mutator]:
    return _mark("set", key)


def collect_mutators(cls: type) -> Tuple[Dict[str, Mutator], Dict[str, Mutator]]:
    """Walk the MRO base-first so subclasses override inherited mutators."""
    getters: Dict[str, Mutator] = {}
    setters: Dict[str, Mutator] = {}
    for klass in reversed(cls.__mro__):
        for value in vars(klass).values():
            marker = getattr(value, MUTATOR_MARKER, None)
            if marker is None:
                continue
            kind, key = marker
            (getters if kind == "get" else setters)[key] = value
    return getters, setters
