"""Business rules for the game catalog, sitting between the API router and the repository."""

import logging
from uuid import UUID, uuid4

from src.core.exceptions import DuplicateTitleError
from src.core.models import MUTABLE_GAME_FIELDS, GameModel, as_utc
from src.db.repository import GameRepository
from src.services.validation import validate_game

logger = logging.getLogger(__name__)

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10


class GameService:
    """
    Enforces title uniqueness, assigns IDs and orchestrates repository calls.

    Not found is reported as None / False, never raised. DuplicateTitleError, InvalidRequestError and
    StorageError propagate to the caller.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Reads --
    def list_paged(
        self, page_number: int = DEFAULT_PAGE_NUMBER, page_size: int = DEFAULT_PAGE_SIZE
    ) -> list[GameModel]:
        return self.repo.get_paged(page_number, page_size)

    def get_by_id(self, game_id: UUID) -> GameModel | None:
        return self.repo.get_by_id(game_id)

    def list_by_genre(self, genre: str) -> list[GameModel]:
        return self.repo.get_by_genre(genre)

    # -- Writes --
    def create(self, game: GameModel) -> GameModel:
        """Store a new game under a freshly generated ID (any ID on the input is overwritten).

        Release dates are kept in UTC; a naive datetime on the input is taken as UTC and replaced in place.
        """
        validate_game(game)
        game.release_date = as_utc(game.release_date)
        if self.repo.title_exists(game.title):
            logger.warning("Rejected new game, title already taken: %r", game.title)
            raise DuplicateTitleError(game.title)

        game.id = uuid4()
        return self.repo.add(game)

    def update(self, game: GameModel) -> bool:
        """Overwrite all mutable fields of the stored game with the same ID. False if there is no such game."""
        validate_game(game)
        game.release_date = as_utc(game.release_date)
        if game.id is None:
            return False
        existing = self.repo.get_by_id(game.id)
        if existing is None:
            return False

        if self.repo.title_exists(game.title, exclude_id=game.id):
            logger.warning(
                "Rejected update of game %s, title already taken: %r", game.id, game.title
            )
            raise DuplicateTitleError(game.title)

        for field in MUTABLE_GAME_FIELDS:
            setattr(existing, field, getattr(game, field))
        return self.repo.update(existing)

    def delete(self, game_id: UUID) -> bool:
        return self.repo.delete(game_id)
