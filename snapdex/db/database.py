"""
Database engine and session management.

Provides the SQLAlchemy engine and session factory backing the key-value
store. Access is synchronous: exactly one foreground process reads and
writes the collection.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from snapdex.models.db import Base


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given database URL."""
    return create_engine(database_url, echo=echo)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Create a session factory bound to an engine.

    Usage:
        with session_factory.begin() as session:
            session.add(...)
    """
    return sessionmaker(engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """
    Initialize database tables.

    Creates all tables defined in the ORM models.
    Should be called once at application startup.
    """
    Base.metadata.create_all(engine)


def drop_db(engine: Engine) -> None:
    """
    Drop all database tables.

    WARNING: Destroys all data. Use only for testing.
    """
    Base.metadata.drop_all(engine)
