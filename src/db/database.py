"""Generate database engine / sessions"""

import logging
from typing import Generator

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """In-memory SQLite shares one connection across threads, anything else uses the configured URL as-is."""
    url = settings.effective_database_url
    if settings.use_in_memory_database:
        engine = create_engine(
            url,
            echo=settings.sql_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    elif url.startswith("sqlite"):
        # sessions may be opened and used on different worker threads
        engine = create_engine(
            url, echo=settings.sql_echo, connect_args={"check_same_thread": False}
        )
    else:
        engine = create_engine(url, echo=settings.sql_echo)

    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready (in_memory=%s)", settings.use_in_memory_database)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autoflush=False, bind=engine)


def session_scope(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
