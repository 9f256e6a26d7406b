# liftlog/init_db.py
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session

from liftlog import models  # noqa: F401  # registers every table on Base.metadata
from liftlog.db import Base, Database
from liftlog.errors import StorageUnavailableError
from liftlog.models import Exercise

log = logging.getLogger(__name__)

STARTER_EXERCISES: tuple[tuple[str, str], ...] = (
    ("Bench Press", "Chest"),
    ("Squat", "Legs"),
    ("Deadlift", "Back"),
    ("Overhead Press", "Shoulders"),
)


def ensure_schema(database: Database) -> None:
    """Create the four tables if missing. Safe to call on every start."""
    try:
        Base.metadata.create_all(database.engine)
    except DBAPIError as e:
        raise StorageUnavailableError(f"cannot create schema: {e.orig}") from e


def seed_if_empty(db: Session) -> int:
    """Insert the starter catalog when no exercise exists yet. Returns rows added."""
    try:
        count = db.execute(select(func.count()).select_from(Exercise)).scalar_one()
        if count:
            return 0
        db.add_all(Exercise(name=name, category=category) for name, category in STARTER_EXERCISES)
        db.commit()
    except DBAPIError as e:
        db.rollback()
        raise StorageUnavailableError(f"cannot seed catalog: {e.orig}") from e
    log.info("seeded exercise catalog with %d starter exercises", len(STARTER_EXERCISES))
    return len(STARTER_EXERCISES)


def init_db(database: Database, *, seed: bool = True) -> None:
    ensure_schema(database)
    if seed:
        with database.session() as db:
            seed_if_empty(db)
