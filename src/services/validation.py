"""Field constraints for a GameModel, checked before anything reaches the repository."""

from datetime import datetime
from decimal import Decimal

from src.core.exceptions import InvalidRequestError
from src.core.models import (
    DESCRIPTION_MAX_LENGTH,
    GENRE_MAX_LENGTH,
    MAX_PRICE,
    MIN_PRICE,
    PRICE_DECIMAL_PLACES,
    TITLE_MAX_LENGTH,
    GameModel,
)

CENT = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)


def validate_game(game: GameModel) -> None:
    """Raise InvalidRequestError listing every violated constraint."""
    problems: list[str] = []

    if not game.title or not game.title.strip():
        problems.append("title is required")
    elif len(game.title) > TITLE_MAX_LENGTH:
        problems.append(f"title must be at most {TITLE_MAX_LENGTH} characters")

    if not game.genre or not game.genre.strip():
        problems.append("genre is required")
    elif len(game.genre) > GENRE_MAX_LENGTH:
        problems.append(f"genre must be at most {GENRE_MAX_LENGTH} characters")

    if game.description is not None and len(game.description) > DESCRIPTION_MAX_LENGTH:
        problems.append(
            f"description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )

    if not isinstance(game.price, Decimal) or not game.price.is_finite():
        problems.append("price must be a decimal number")
    elif not (MIN_PRICE <= game.price <= MAX_PRICE):
        problems.append(f"price must be between {MIN_PRICE} and {MAX_PRICE}")
    elif game.price != game.price.quantize(CENT):
        # the store keeps exactly this many places, more would be rounded away
        problems.append(f"price must have at most {PRICE_DECIMAL_PLACES} decimal places")

    if game.release_date is None:
        problems.append("release_date is required")
    elif not isinstance(game.release_date, datetime):
        problems.append("release_date must be a date and time")

    # bool is an int subclass, reject it explicitly
    if (
        isinstance(game.stock_quantity, bool)
        or not isinstance(game.stock_quantity, int)
        or game.stock_quantity < 0
    ):
        problems.append("stock_quantity must be a non-negative integer")

    if problems:
        raise InvalidRequestError("Invalid game: " + "; ".join(problems))
