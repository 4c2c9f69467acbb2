"""Database engine, session factory and transaction helpers."""

from contextlib import contextmanager
from typing import Generator, Iterator

import structlog
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import get_settings
from app.core.exceptions import ServerException

settings = get_settings()
logger = structlog.get_logger(__name__)

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency — one session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """Run a block as one all-or-nothing unit: commit on success, roll back on any error.

    Driver-level failures (lost connection, lock timeout) surface as ServerException.
    """
    try:
        yield db
        db.commit()
    except OperationalError as e:
        db.rollback()
        logger.error("Database operation failed", error=str(e.orig))
        raise ServerException("Database unavailable") from e
    except Exception:
        db.rollback()
        raise
