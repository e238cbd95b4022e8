"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and the db layer (lower) convert their own representations into/from the model defined here.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

TITLE_MAX_LENGTH = 100
GENRE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500
MIN_PRICE = Decimal("0.01")
MAX_PRICE = Decimal("10000.00")
PRICE_DECIMAL_PLACES = 2

# Fields the service is allowed to overwrite on an existing record (everything except the id)
MUTABLE_GAME_FIELDS = (
    "title",
    "genre",
    "description",
    "price",
    "release_date",
    "stock_quantity",
)


def as_utc(value: datetime) -> datetime:
    """Aware datetime in UTC. Naive values are read as UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class GameModel:
    """Catalog entry for a single game, shared between API, Service and DB layers."""

    title: str
    genre: str
    price: Decimal
    release_date: datetime
    stock_quantity: int
    description: Optional[str] = None
    id: Optional[UUID] = None
