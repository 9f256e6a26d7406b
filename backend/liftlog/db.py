import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

log = logging.getLogger(__name__)

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass


def _sqlite_pragmas(dbapi_conn, _record):
    # foreign_keys is per-connection in SQLite and off by default
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys=ON")
    cur.execute("PRAGMA journal_mode=WAL")
    cur.close()


class Database:
    """Owns the engine and session factory for one backing store."""

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        # sessions may hop threads inside FastAPI's threadpool
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        kwargs = {}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, or each thread would see its own empty database
            kwargs["poolclass"] = StaticPool
        self.engine: Engine = create_engine(
            url, echo=echo, pool_pre_ping=True, connect_args=connect_args, **kwargs
        )
        event.listen(self.engine, "connect", _sqlite_pragmas)
        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    def session(self) -> Session:
        return self.SessionLocal()

    def check(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        log.info("disposing database engine for %s", self.url)
        self.engine.dispose()


# Dependency for FastAPI routes
def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
