"""Generate database session"""

from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import DATABASE_URL, DB_ECHO
from src.db.schema import Base


def create_session_factory(
    url: str = DATABASE_URL, echo: bool = DB_ECHO
) -> sessionmaker[Session]:
    """Engine + session factory for the given URL. Ensures all tables are created."""
    engine = create_engine(url, echo=echo)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)


_session_factory: Optional[sessionmaker[Session]] = None


def get_db() -> Iterator[Session]:
    """One session per unit of work, on the database configured through ARCADE_DATABASE_URL."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory()
    db = _session_factory()
    try:
        yield db
    finally:
        db.close()
