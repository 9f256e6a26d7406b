# liftlog/repositories/workout_repo.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from sqlalchemy import delete, select

from liftlog import entities
from liftlog.errors import ValidationError
from liftlog.models import Exercise, Workout, WorkoutExercise, WorkoutSet
from liftlog.repositories.base import BaseRepository
from liftlog.repositories.exercise_repo import to_entity as exercise_entity

log = logging.getLogger(__name__)

def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T10:00:00.000Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    # READS
    def get(self, workout_id: int) -> Optional[entities.Workout]:
        row = self.read(select(Workout).where(Workout.id == workout_id)).scalar_one_or_none()
        return self._hydrate(row) if row else None

    def list(self) -> list[entities.Workout]:
        rows = self.read(select(Workout).order_by(Workout.id.asc())).scalars().all()
        return [self._hydrate(r) for r in rows]

    # WRITES
    def create(self, entries: Sequence[dict]) -> entities.Workout:
        """
        Persist one workout with its exercises and sets, all or nothing.

        ``entries`` is ``[{"exercise_id": int, "sets": [{"reps": int, "weight": float}]}]``,
        kept in the given order. Unknown exercise ids fail the whole transaction
        with IntegrityError.
        """
        if not entries:
            raise ValidationError("a workout needs at least one exercise")

        with self.unit_of_work():
            workout = self.add_and_flush(Workout(date=utc_timestamp()))
            for entry in entries:
                we = self.add_and_flush(
                    WorkoutExercise(workout_id=workout.id, exercise_id=int(entry["exercise_id"]))
                )
                for s in entry.get("sets") or ():
                    self._add_set(we.id, s["reps"], s["weight"])
            workout_id = workout.id

        log.info("logged workout id=%s with %d exercises", workout_id, len(entries))
        return self.get(workout_id)

    def delete(self, workout_id: int) -> bool:
        with self.unit_of_work():
            if self.db.get(Workout, workout_id) is None:
                return False
            we_ids = select(WorkoutExercise.id).where(WorkoutExercise.workout_id == workout_id)
            self.db.execute(delete(WorkoutSet).where(WorkoutSet.workout_exercise_id.in_(we_ids)))
            self.db.execute(delete(WorkoutExercise).where(WorkoutExercise.workout_id == workout_id))
            self.db.execute(delete(Workout).where(Workout.id == workout_id))
            self.db.expunge_all()
        log.info("deleted workout id=%s", workout_id)
        return True

    def _add_set(self, workout_exercise_id: int, reps: int, weight: float) -> WorkoutSet:
        if reps < 0 or weight < 0:
            raise ValidationError("reps and weight must be non-negative")
        return self.add_and_flush(
            WorkoutSet(workout_exercise_id=workout_exercise_id, reps=int(reps), weight=float(weight))
        )

    # HYDRATION
    def _hydrate(self, row: Workout) -> entities.Workout:
        we_rows = self.read(
            select(WorkoutExercise)
            .where(WorkoutExercise.workout_id == row.id)
            .order_by(WorkoutExercise.id.asc())
        ).scalars().all()
        we_ids = [we.id for we in we_rows]

        sets_by_we: dict[int, list[entities.WorkoutSet]] = {i: [] for i in we_ids}
        if we_ids:
            set_rows = self.read(
                select(WorkoutSet)
                .where(WorkoutSet.workout_exercise_id.in_(we_ids))
                .order_by(WorkoutSet.id.asc())
            ).scalars().all()
            for s in set_rows:
                sets_by_we[s.workout_exercise_id].append(
                    entities.WorkoutSet(id=int(s.id), reps=int(s.reps), weight=float(s.weight))
                )

        exercises = self._exercises_by_id(we.exercise_id for we in we_rows)
        items = []
        for we in we_rows:
            ex = exercises.get(we.exercise_id)
            if ex is None:
                log.warning("workout %s references missing exercise %s", row.id, we.exercise_id)
            items.append(entities.WorkoutExercise(
                id=int(we.id), exercise_id=int(we.exercise_id), exercise=ex, sets=sets_by_we[we.id],
            ))
        return entities.Workout(id=int(row.id), date=str(row.date), exercises=items)

    def _exercises_by_id(self, ids: Iterable[int]) -> dict[int, entities.Exercise]:
        wanted = set(ids)
        if not wanted:
            return {}
        rows = self.read(select(Exercise).where(Exercise.id.in_(wanted))).scalars().all()
        return {r.id: exercise_entity(r) for r in rows}
