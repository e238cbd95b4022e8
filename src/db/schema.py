"""Database tables / schema"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from src.core.models import (
    DESCRIPTION_MAX_LENGTH,
    GENRE_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    TITLE_MAX_LENGTH,
    as_utc,
)


def genre_key(genre: str) -> str:
    """Case-folded genre, compared in Python terms so non-ASCII letters match on every backend."""
    return genre.casefold()


class UTCDateTime(TypeDecorator[datetime]):
    """
    Timezone-aware datetime stored as UTC.

    Some dialects (SQLite) drop the offset on the way in, so values are converted to UTC before binding and
    tagged as UTC again when read back.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        return as_utc(value)

    def process_result_value(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        return as_utc(value)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    # unique index is the source of truth for title uniqueness (closes the check-then-insert race)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), unique=True, index=True)
    genre: Mapped[str] = mapped_column(String(GENRE_MAX_LENGTH))
    # casefold() can expand a character up to three
    genre_key: Mapped[str] = mapped_column(String(GENRE_MAX_LENGTH * 3), index=True)
    description: Mapped[Optional[str]] = mapped_column(String(DESCRIPTION_MAX_LENGTH))
    price: Mapped[Decimal] = mapped_column(Numeric(10, PRICE_DECIMAL_PLACES))
    release_date: Mapped[datetime] = mapped_column(UTCDateTime())
    stock_quantity: Mapped[int]
