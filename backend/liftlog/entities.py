# liftlog/entities.py
"""
Plain typed records the repositories hand out.

ORM rows never leave the repositories; they are mapped into these at the
boundary so callers get a detached, fully-loaded object graph.
"""
from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(slots=True)
class Exercise:
    id: int
    name: str
    category: str


@dataclass(slots=True)
class WorkoutSet:
    id: int
    reps: int
    weight: float


@dataclass(slots=True)
class WorkoutExercise:
    id: int
    exercise_id: int
    # None only when the referenced exercise row is gone
    exercise: Exercise | None
    sets: list[WorkoutSet] = field(default_factory=list)


@dataclass(slots=True)
class Workout:
    id: int
    date: str
    exercises: list[WorkoutExercise] = field(default_factory=list)
