"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file by default) and provides
small helpers used by the application, scripts and tests. The engine is
created once per process and shared by every request; each request gets
its own `Session`.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session

from .config import settings
from .errors import StoreError

logger = logging.getLogger("wordly.db")


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's threadpool workers.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    Tables are created if missing and left untouched otherwise; there is
    no migration step.
    """
    from . import models  # noqa: F401  (registers the tables on the metadata)
    SQLModel.metadata.create_all(engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session


@contextmanager
def store_errors(session: Session):
    """Translate SQLAlchemy failures inside the block into `StoreError`.

    The session is rolled back so it stays usable, and the driver message
    is passed through verbatim.
    """
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("store operation failed: %s", e)
        raise StoreError(str(e)) from e
