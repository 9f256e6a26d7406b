# liftlog/facade.py
"""
Query facade: the operation set clients consume.

Translates loosely-typed client input (string ids, plain dicts) into the
repositories' types and turns "no such row" into either ``None`` or
NotFoundError, depending on the operation.
"""
from __future__ import annotations
from typing import Any, Iterable, Optional

import pydantic
from sqlalchemy.orm import Session

from liftlog import entities
from liftlog.errors import NotFoundError, ValidationError
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.exercise import ExerciseCreate, ExerciseUpdate
from liftlog.schemas.workout import HistorySummary, WorkoutCreate
from liftlog.stats import summarize


def coerce_id(value: Any) -> int:
    """
    Accept ints or numeric strings (GraphQL-style IDs) as storage keys.
    Zero or negative ids are well-formed; they just never match a row.
    """
    if isinstance(value, bool):
        raise ValidationError(f"invalid id: {value!r}")
    if isinstance(value, int):
        n = value
    else:
        try:
            n = int(str(value).strip())
        except ValueError:
            raise ValidationError(f"invalid id: {value!r}") from None
    return n


def _validate(model: type[pydantic.BaseModel], data: Any) -> Any:
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError.from_errors(e.errors()) from e


class WorkoutTracker:
    def __init__(self, db: Session):
        self.exercises_repo = ExerciseRepository(db)
        self.workouts_repo = WorkoutRepository(db)

    # QUERIES
    def list_exercises(self) -> list[entities.Exercise]:
        return self.exercises_repo.list()

    def list_workouts(self) -> list[entities.Workout]:
        return self.workouts_repo.list()

    def get_workout(self, workout_id: Any) -> Optional[entities.Workout]:
        return self.workouts_repo.get(coerce_id(workout_id))

    def history_summary(self) -> HistorySummary:
        return summarize(self.workouts_repo.list())

    # MUTATIONS
    def create_exercise(self, name: str, category: str) -> entities.Exercise:
        payload = _validate(ExerciseCreate, {"name": name, "category": category})
        return self.exercises_repo.create(name=payload.name, category=payload.category)

    def update_exercise(self, exercise_id: Any, name: str, category: str) -> entities.Exercise:
        ex_id = coerce_id(exercise_id)
        payload = _validate(ExerciseUpdate, {"name": name, "category": category})
        updated = self.exercises_repo.update(ex_id, name=payload.name, category=payload.category)
        if updated is None:
            raise NotFoundError(f"exercise {ex_id} not found")
        return updated

    def delete_exercise(self, exercise_id: Any) -> Optional[entities.Exercise]:
        return self.exercises_repo.delete(coerce_id(exercise_id))

    def log_workout(self, entries: Iterable[Any]) -> entities.Workout:
        payload = _validate(WorkoutCreate, {"exercises": _normalize_entries(entries)})
        return self.workouts_repo.create([e.model_dump() for e in payload.exercises])

    def delete_workout(self, workout_id: Any) -> bool:
        return self.workouts_repo.delete(coerce_id(workout_id))


def _normalize_entries(entries: Iterable[Any]) -> list[Any]:
    # Clients may send camelCase exerciseId
    out = []
    for e in entries or ():
        if isinstance(e, dict) and "exerciseId" in e and "exercise_id" not in e:
            e = {**e, "exercise_id": e["exerciseId"]}
        elif isinstance(e, pydantic.BaseModel):
            e = e.model_dump()
        out.append(e)
    return out
