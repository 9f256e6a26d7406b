# liftlog/repositories/base.py
from __future__ import annotations
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

from sqlalchemy import exc as sa_exc
from sqlalchemy.orm import Session

from liftlog.errors import IntegrityError, StorageUnavailableError, ValidationError

T = TypeVar("T")  # SQLAlchemy model type

def require_text(value: str | None, field: str) -> str:
    """Trim and reject blank strings."""
    v = (value or "").strip()
    if not v:
        raise ValidationError(f"{field} cannot be blank")
    return v

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def unit_of_work(self) -> Iterator[Session]:
        """Commit everything done inside the block, or roll all of it back."""
        try:
            yield self.db
            self.db.commit()
        except sa_exc.IntegrityError as e:
            self.db.rollback()
            raise IntegrityError(f"constraint violated: {e.orig}") from e
        except sa_exc.DBAPIError as e:
            self.db.rollback()
            raise StorageUnavailableError(f"storage error: {e.orig}") from e
        except BaseException:
            self.db.rollback()
            raise

    def add_and_flush(self, entity: T) -> T:
        self.db.add(entity)
        self.db.flush()
        return entity

    def read(self, stmt):
        """Execute a read statement, surfacing driver failures as storage errors."""
        try:
            return self.db.execute(stmt)
        except sa_exc.DBAPIError as e:
            self.db.rollback()
            raise StorageUnavailableError(f"storage error: {e.orig}") from e
