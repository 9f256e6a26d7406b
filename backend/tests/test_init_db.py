import pytest
from sqlalchemy import inspect, select

from liftlog.db import Database
from liftlog.errors import StorageUnavailableError
from liftlog.init_db import STARTER_EXERCISES, ensure_schema, init_db, seed_if_empty
from liftlog.models import Exercise
from liftlog.repositories.exercise_repo import ExerciseRepository

def test_tables_created(database):
    names = set(inspect(database.engine).get_table_names())
    assert {"exercises", "workouts", "workout_exercises", "workout_sets"} <= names

def test_foreign_keys_declared(database):
    insp = inspect(database.engine)
    we_fks = {fk["referred_table"]: fk["constrained_columns"] for fk in insp.get_foreign_keys("workout_exercises")}
    assert we_fks == {"workouts": ["workout_id"], "exercises": ["exercise_id"]}
    set_fks = insp.get_foreign_keys("workout_sets")
    assert set_fks[0]["referred_table"] == "workout_exercises"
    assert set_fks[0]["constrained_columns"] == ["workout_exercise_id"]

def test_pragmas_applied(database):
    with database.engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar_one() == 1
        assert conn.exec_driver_sql("PRAGMA journal_mode").scalar_one().lower() == "wal"

def test_seed_on_empty_store(db):
    rows = ExerciseRepository(db).list()
    assert [(e.name, e.category) for e in rows] == [
        ("Bench Press", "Chest"),
        ("Squat", "Legs"),
        ("Deadlift", "Back"),
        ("Overhead Press", "Shoulders"),
    ]
    assert [e.id for e in rows] == sorted(e.id for e in rows)

def test_init_twice_does_not_duplicate(database, db):
    init_db(database)
    init_db(database)
    assert len(db.execute(select(Exercise)).scalars().all()) == len(STARTER_EXERCISES)

def test_seed_skipped_when_catalog_not_empty(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'own.sqlite'}")
    ensure_schema(database)
    with database.session() as db:
        ExerciseRepository(db).create(name="Pull Up", category="Back")
        assert seed_if_empty(db) == 0
        assert [e.name for e in ExerciseRepository(db).list()] == ["Pull Up"]
    database.dispose()

def test_seed_can_be_disabled(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'bare.sqlite'}")
    init_db(database, seed=False)
    with database.session() as db:
        assert ExerciseRepository(db).list() == []
    database.dispose()

def test_unopenable_store_is_fatal(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'missing-dir' / 'x.sqlite'}")
    with pytest.raises(StorageUnavailableError):
        init_db(database)
    database.dispose()

def test_models_declare_no_orm_cascades():
    # deletes go through explicit statements in the repositories
    from liftlog.models import Workout, WorkoutExercise, WorkoutSet
    for model in (Exercise, Workout, WorkoutExercise, WorkoutSet):
        assert not inspect(model).relationships
