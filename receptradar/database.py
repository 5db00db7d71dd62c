"""Database configuration and session management."""

import logging
from collections.abc import Generator
from dataclasses import dataclass
from typing import Any

from fastapi import Request
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from receptradar.config import Settings

logger = logging.getLogger(__name__)

Base: Any = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the on-device SQLite store.

    pysqlite defers BEGIN until the first DML statement, which would leave
    schema changes outside the migration transaction. The driver's own
    transaction handling is switched off and BEGIN is emitted explicitly.
    """
    engine = create_engine(database_url, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        # journal_mode cannot be changed inside a transaction
        cursor.execute("PRAGMA journal_mode = WAL")
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


@dataclass
class Store:
    """Handle to the migrated store, owned by the application."""

    engine: Engine
    session_factory: sessionmaker

    def session(self) -> Session:
        return self.session_factory()

    def close(self) -> None:
        self.engine.dispose()


def open_store(settings: Settings) -> Store:
    """Migrate the store to the current schema and return a handle to it.

    Raises MigrationError when the schema cannot be brought up to date; the
    store is then left at its previous version.
    """
    from receptradar.migrations import migrate

    engine = create_db_engine(settings.database_url)
    try:
        version = migrate(engine)
    except Exception:
        engine.dispose()
        raise
    logger.info(f"Store ready at schema version {version}")
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return Store(engine=engine, session_factory=session_factory)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = request.app.state.store.session()
    try:
        yield db
    finally:
        db.close()
