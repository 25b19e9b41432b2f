# backend/database.py
import logging

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, SQLModel, Session

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine for ``database_url``.

    SQLite engines are shared across threads, and in-memory SQLite databases
    are pinned to a single connection so every session sees the same data.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(database_url, echo=echo, pool_recycle=3600, pool_pre_ping=True)


def create_db_and_tables(engine: Engine):
    """Creates all tables from the models package"""
    # Importing models package ensures SQLModel metadata is populated
    import models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def connect(engine: Engine) -> bool:
    """Check the store is reachable and its tables exist.

    Failures are logged and reported through the return value; the caller
    decides whether to keep going.
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        create_db_and_tables(engine)
    except Exception:
        logger.exception("Database connection error")
        return False
    logger.info("Connected to database")
    return True


# Dependency to get a database session
def get_session(request: Request):
    """Provides a database session bound to the application's engine."""
    with Session(request.app.state.engine) as session:
        yield session
