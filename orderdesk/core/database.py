from datetime import datetime, timezone
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from . import config

Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what TIMESTAMP columns hand back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the engine (a bounded connection pool) and the session factory.

    One instance is built per application and handed to ``create_app``; request
    handlers reach it through the ``get_db`` dependency.
    """

    def __init__(self, url: str = None, pool_size: int = None, pool_timeout: int = None, echo: bool = False):
        self.url = make_url(url or config.DATABASE_URL)
        engine_kwargs = {"echo": echo}

        if self.url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            # Requests beyond pool capacity wait for a free connection instead of failing
            engine_kwargs.update(
                pool_size=pool_size or config.DB_POOL_SIZE,
                max_overflow=0,
                pool_timeout=pool_timeout or config.DB_POOL_TIMEOUT,
                pool_pre_ping=True,
            )

        self.engine = create_engine(self.url, **engine_kwargs)
        if self.url.get_backend_name() == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
