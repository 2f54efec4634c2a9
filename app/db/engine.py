# app/db/engine.py

from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from app.config import get_settings


def create_db_engine(db_url: str) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    engine = create_engine(db_url, future=True)

    if engine.dialect.name == "sqlite":
        # SQLite ignores foreign keys (and ON DELETE CASCADE) unless asked
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):  # type: ignore[no-redef]
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


@lru_cache
def _engine_for(db_url: str) -> Engine:
    return create_db_engine(db_url)


def get_engine(db_url: Optional[str] = None) -> Engine:
    return _engine_for(db_url or get_settings().database_url)
