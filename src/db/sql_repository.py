"""Implementation of the repositories using SQLAlchemy"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import DuplicateTitleError, InvalidRequestError, StorageError
from src.core.models import GameModel
from src.db.schema import Base, DBGame, genre_key

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
RowT = TypeVar("RowT", bound=Base)
ResultT = TypeVar("ResultT")


class SQLRepository(ABC, Generic[ModelT, RowT]):
    """
    Generic CRUD for one mapped table.

    Subclasses set `row_type` and implement the two conversion hooks. Records are always ordered by primary key,
    so pages line up with get_all().
    """

    row_type: type[RowT]

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_all(self) -> list[ModelT]:
        query = select(self.row_type).order_by(self._primary_key())
        return [self._to_model(row) for row in self._run(lambda: self.db.scalars(query).all())]

    def get_paged(self, page_number: int, page_size: int) -> list[ModelT]:
        if page_number < 1 or page_size < 1:
            raise InvalidRequestError(
                f"page_number and page_size must be >= 1, got {page_number=}, {page_size=}"
            )
        offset = (page_number - 1) * page_size
        total = self.count()
        # past the end: answer without sending an offset the driver may not be able to represent
        if offset >= total:
            return []
        query = (
            select(self.row_type)
            .order_by(self._primary_key())
            .offset(offset)
            .limit(min(page_size, total - offset))
        )
        return [self._to_model(row) for row in self._run(lambda: self.db.scalars(query).all())]

    def count(self) -> int:
        query = select(func.count()).select_from(self.row_type)
        return self._run(lambda: self.db.scalar(query)) or 0

    def get_by_id(self, entity_id: Any) -> ModelT | None:
        row = self._fetch(entity_id)
        if row is None:
            return None
        return self._to_model(row)

    def add(self, entity: ModelT) -> ModelT:
        row = self.row_type()
        self._apply_to_row(entity, row)
        self.db.add(row)
        self._commit(entity)
        self._run(lambda: self.db.refresh(row))
        return self._to_model(row)

    def update(self, entity: ModelT) -> bool:
        row = self._fetch(self._model_id(entity))
        if row is None:
            return False
        self._apply_to_row(entity, row)
        self._commit(entity)
        return True

    def delete(self, entity_id: Any) -> bool:
        row = self._fetch(entity_id)
        if row is None:
            return False
        self.db.delete(row)
        self._commit(None)
        return True

    # -- Hooks for subclasses --
    @abstractmethod
    def _to_model(self, row: RowT) -> ModelT:
        """Convert SQLAlchemy row to data transfer model."""

    @abstractmethod
    def _apply_to_row(self, entity: ModelT, row: RowT) -> None:
        """Copy every persisted field of the model onto the row (including the id)."""

    def _model_id(self, entity: ModelT) -> Any:
        return getattr(entity, "id")

    def _translate_integrity_error(self, entity: ModelT | None, exc: IntegrityError) -> Exception:
        """Map a constraint violation onto a domain error. Default: generic storage failure."""
        return StorageError(f"Constraint violated in {self.row_type.__tablename__}: {exc.orig}")

    # -- Internal helpers --
    def _primary_key(self) -> Any:
        return self.row_type.__table__.primary_key.columns.values()[0]

    def _fetch(self, entity_id: Any) -> RowT | None:
        return self._run(lambda: self.db.get(self.row_type, entity_id))

    def _run(self, operation: Callable[[], ResultT]) -> ResultT:
        """Execute a read, turning driver failures into StorageError."""
        try:
            return operation()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Read from %s failed: %s", self.row_type.__tablename__, exc)
            raise StorageError(f"Could not read from {self.row_type.__tablename__}") from exc

    def _commit(self, entity: ModelT | None) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise self._translate_integrity_error(entity, exc) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Write to %s failed: %s", self.row_type.__tablename__, exc)
            raise StorageError(f"Could not write to {self.row_type.__tablename__}") from exc


class SQLGameRepository(SQLRepository[GameModel, DBGame]):
    """Games stored using SQL / methods implemented using SQLAlchemy"""

    row_type = DBGame

    def get_by_genre(self, genre: str) -> list[GameModel]:
        query = (
            select(DBGame)
            .where(DBGame.genre_key == genre_key(genre))
            .order_by(DBGame.id)
        )
        return [self._to_model(row) for row in self._run(lambda: self.db.scalars(query).all())]

    def title_exists(self, title: str, exclude_id: Optional[UUID] = None) -> bool:
        query = select(DBGame.id).where(DBGame.title == title)
        if exclude_id is not None:
            query = query.where(DBGame.id != exclude_id)
        return self._run(lambda: self.db.scalar(query.limit(1))) is not None

    def _to_model(self, row: DBGame) -> GameModel:
        return GameModel(
            id=row.id,
            title=row.title,
            genre=row.genre,
            description=row.description,
            price=row.price,
            release_date=row.release_date,
            stock_quantity=row.stock_quantity,
        )

    def _apply_to_row(self, entity: GameModel, row: DBGame) -> None:
        if entity.id is not None:
            row.id = entity.id
        row.title = entity.title
        row.genre = entity.genre
        row.genre_key = genre_key(entity.genre)
        row.description = entity.description
        row.price = entity.price
        row.release_date = entity.release_date
        row.stock_quantity = entity.stock_quantity

    def _translate_integrity_error(self, entity: GameModel | None, exc: IntegrityError) -> Exception:
        # SQLite: "UNIQUE constraint failed: games.title", PostgreSQL: "... (title)=(...) already exists"
        if entity is not None and "title" in str(exc.orig).lower():
            return DuplicateTitleError(entity.title)
        return super()._translate_integrity_error(entity, exc)
