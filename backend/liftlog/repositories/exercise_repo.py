# liftlog/repositories/exercise_repo.py
from __future__ import annotations
import logging
from typing import Optional

from sqlalchemy import delete, select

from liftlog import entities
from liftlog.models import Exercise, WorkoutExercise, WorkoutSet
from liftlog.repositories.base import BaseRepository, require_text

log = logging.getLogger(__name__)

def to_entity(row: Exercise) -> entities.Exercise:
    return entities.Exercise(id=int(row.id), name=str(row.name), category=str(row.category))

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    # READS
    def get(self, exercise_id: int) -> Optional[entities.Exercise]:
        row = self.read(select(Exercise).where(Exercise.id == exercise_id)).scalar_one_or_none()
        return to_entity(row) if row else None

    def list(self) -> list[entities.Exercise]:
        rows = self.read(select(Exercise).order_by(Exercise.id.asc())).scalars().all()
        return [to_entity(r) for r in rows]

    # WRITES
    def create(self, *, name: str, category: str) -> entities.Exercise:
        name = require_text(name, "name")
        category = require_text(category, "category")
        with self.unit_of_work():
            row = self.add_and_flush(Exercise(name=name, category=category))
        log.info("created exercise id=%s name=%r", row.id, name)
        return to_entity(row)

    def update(self, exercise_id: int, *, name: str, category: str) -> Optional[entities.Exercise]:
        """Rename/recategorize; None when the id does not exist."""
        name = require_text(name, "name")
        category = require_text(category, "category")
        with self.unit_of_work():
            row = self.db.get(Exercise, exercise_id)
            if row is None:
                return None
            row.name = name
            row.category = category
        return to_entity(row)

    def delete(self, exercise_id: int) -> Optional[entities.Exercise]:
        """
        Remove the exercise together with every workout entry (and its sets)
        that references it. Other entries of the same workouts are untouched.
        Returns the exercise as it was before deletion, or None.
        """
        with self.unit_of_work():
            row = self.db.get(Exercise, exercise_id)
            if row is None:
                return None
            before = to_entity(row)

            we_ids = self.db.execute(
                select(WorkoutExercise.id).where(WorkoutExercise.exercise_id == exercise_id)
            ).scalars().all()
            if we_ids:
                self.db.execute(delete(WorkoutSet).where(WorkoutSet.workout_exercise_id.in_(we_ids)))
            self.db.execute(delete(WorkoutExercise).where(WorkoutExercise.exercise_id == exercise_id))
            self.db.execute(delete(Exercise).where(Exercise.id == exercise_id))
            # bulk deletes bypass the identity map
            self.db.expunge_all()
        log.info("deleted exercise id=%s with %d workout entries", exercise_id, len(we_ids))
        return before
