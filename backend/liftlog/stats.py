# liftlog/stats.py
"""Volume aggregates over hydrated workouts (volume = sum of reps x weight)."""
from __future__ import annotations
from typing import Sequence

from liftlog import entities
from liftlog.schemas.workout import HistorySummary, WorkoutVolume


def workout_volume(workout: entities.Workout) -> float:
    return sum(s.reps * s.weight for we in workout.exercises for s in we.sets)


def max_weights(workout: entities.Workout) -> dict[str, float]:
    out: dict[str, float] = {}
    for we in workout.exercises:
        if not we.sets:
            continue
        key = we.exercise.name if we.exercise else str(we.exercise_id)
        heaviest = max(s.weight for s in we.sets)
        out[key] = max(out.get(key, heaviest), heaviest)
    return out


def summarize(workouts: Sequence[entities.Workout]) -> HistorySummary:
    rows = [
        WorkoutVolume(workout_id=w.id, date=w.date, volume=workout_volume(w), max_weight=max_weights(w))
        for w in workouts
    ]
    volumes = [r.volume for r in rows]
    total = sum(volumes)
    return HistorySummary(
        workout_count=len(rows),
        total_volume=total,
        best_volume=max(volumes, default=0.0),
        average_volume=total / len(rows) if rows else 0.0,
        workouts=rows,
    )
