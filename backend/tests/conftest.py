"""
Every test gets its own SQLite file under tmp_path, created and seeded the
same way the app does on startup.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from liftlog.db import Database
from liftlog.facade import WorkoutTracker
from liftlog.init_db import init_db
from liftlog.main import create_app
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.settings import Settings

TABLES = ("exercises", "workouts", "workout_exercises", "workout_sets")


@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, DB_PATH=str(tmp_path / "fitness.sqlite"))


@pytest.fixture
def database(settings):
    database = Database(settings.DATABASE_URL)
    init_db(database)
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    with database.session() as session:
        yield session


@pytest.fixture
def tracker(db):
    return WorkoutTracker(db)


@pytest.fixture
def seeded_ids(db):
    return {e.name: e.id for e in ExerciseRepository(db).list()}


@pytest.fixture
def row_counts(database):
    """Committed row count per table, read on a fresh connection."""
    def count():
        with database.engine.connect() as conn:
            return {t: conn.execute(text(f"SELECT COUNT(*) FROM {t}")).scalar_one() for t in TABLES}
    return count


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c
