"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.api.main import create_app
from src.core.config import Settings
from src.core.models import GameModel
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

GameFactory = Callable[..., GameModel]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def make_game() -> GameFactory:
    """Build a valid GameModel, override any field through keyword arguments."""

    def _make_game(**overrides: object) -> GameModel:
        fields: dict[str, object] = dict(
            title="Sample Game",
            genre="Action",
            description="A test game description",
            price=Decimal("49.99"),
            release_date=datetime(2024, 11, 20, 18, 56, tzinfo=timezone.utc),
            stock_quantity=5,
        )
        fields.update(overrides)
        return GameModel(**fields)  # type: ignore[arg-type]

    return _make_game


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Fresh app with its own in-memory database for every test."""
    app = create_app(Settings(use_in_memory_database=True, log_level="WARNING"))
    with TestClient(app) as test_client:
        yield test_client
    app.state.engine.dispose()
