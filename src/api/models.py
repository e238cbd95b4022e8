"""Requests and Response models"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.models import (
    DESCRIPTION_MAX_LENGTH,
    GENRE_MAX_LENGTH,
    MAX_PRICE,
    MIN_PRICE,
    PRICE_DECIMAL_PLACES,
    TITLE_MAX_LENGTH,
    GameModel,
    as_utc,
)


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """Body for a new game. An `id` may be sent but is ignored, the service assigns one."""

    id: Optional[UUID] = None
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    genre: str = Field(max_length=GENRE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    price: Decimal = Field(ge=MIN_PRICE, le=MAX_PRICE, decimal_places=PRICE_DECIMAL_PLACES)
    release_date: datetime
    stock_quantity: int = Field(ge=0)

    @field_validator("title", "genre")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("title and genre cannot be blank.")
        return value

    @field_validator("release_date")
    @classmethod
    def normalize_release_date(cls, value: datetime) -> datetime:
        return as_utc(value)

    def to_model(self) -> GameModel:
        return GameModel(
            id=self.id,
            title=self.title,
            genre=self.genre,
            description=self.description,
            price=self.price,
            release_date=self.release_date,
            stock_quantity=self.stock_quantity,
        )


class UpdateGameRequest(CreateGameRequest):
    """Full replacement of a game. The `id` must match the one in the URL."""

    id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    id: UUID
    title: str
    genre: str
    description: Optional[str]
    price: Decimal
    release_date: datetime
    stock_quantity: int

    @classmethod
    def from_model(cls, model: GameModel) -> "GameResponse":
        return cls(
            id=model.id,
            title=model.title,
            genre=model.genre,
            description=model.description,
            price=model.price,
            release_date=model.release_date,
            stock_quantity=model.stock_quantity,
        )


class ErrorResponse(BaseModel):
    status_code: int
    message: str
    details: Optional[str] = None
