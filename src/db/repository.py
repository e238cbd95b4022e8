"""Protocol repositories (one implementation per backing store, see sql_repository.py)"""

from typing import Optional, Protocol, TypeVar
from uuid import UUID

from src.core.models import GameModel

EntityT = TypeVar("EntityT")
IdT = TypeVar("IdT", contravariant=True)


class Repository(Protocol[EntityT, IdT]):
    """CRUD over any entity identified by a unique key. Performs no validation."""

    def get_all(self) -> list[EntityT]:
        """All records, in a stable order."""
        ...

    def get_paged(self, page_number: int, page_size: int) -> list[EntityT]:
        """1-indexed page, same order as get_all(). Empty list past the last page."""
        ...

    def get_by_id(self, entity_id: IdT) -> EntityT | None:
        """Get record by ID, if it exists."""
        ...

    def add(self, entity: EntityT) -> EntityT:
        """Store a new record and return it as stored."""
        ...

    def update(self, entity: EntityT) -> bool:
        """Overwrite the record with the same ID. False if there is no such record."""
        ...

    def delete(self, entity_id: IdT) -> bool:
        """Remove a record. False if there is no such record."""
        ...


class GameRepository(Repository[GameModel, UUID], Protocol):
    """Game specific lookups on top of the generic CRUD."""

    def get_by_genre(self, genre: str) -> list[GameModel]:
        """Case-insensitive genre match. Empty list when nothing matches."""
        ...

    def title_exists(self, title: str, exclude_id: Optional[UUID] = None) -> bool:
        """Exact (case-sensitive) title match, ignoring the record with exclude_id."""
        ...
