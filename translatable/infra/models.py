from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import DateTime, Integer, String, Text, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ..core.mixin import HasTranslations
from ..core.mutators import set_mutator


def cast_value(cast: Optional[str], value: Any) -> Any:
    if value is None or cast is None:
        return value
    if cast == "array":
        return json.loads(value) if isinstance(value, str) and value else (value or {})
    if cast == "datetime" and isinstance(value, datetime):
        return value.isoformat()
    return value


class Base(DeclarativeBase):
    __casts__ = {}

    def get_casts(self) -> Dict[str, str]:
        return dict(self.__casts__)

    def cast_attribute(self, key: str, cast: Optional[str]) -> Any:
        return cast_value(cast, getattr(self, key))

    def to_dict(self) -> Dict[str, Any]:
        casts = self.get_casts()
        return {
            attr.key: self.cast_attribute(attr.key, casts.get(attr.key))
            for attr in inspect(self).mapper.column_attrs
        }


class Article(HasTranslations, Base):
    __tablename__ = "articles"
    __translatable__ = ("title", "body")
    __casts__ = {"published_at": "datetime", "created_at": "datetime"}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    slug: Mapped[str] = mapped_column(String(255), unique=True)
    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    published_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    @set_mutator("title")
    def strip_title(self, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value
