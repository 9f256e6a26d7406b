from typing import Annotated
from pydantic import BaseModel, Field

from liftlog.schemas.exercise import ExerciseRead

Reps = Annotated[int, Field(ge=0)]
Weight = Annotated[float, Field(ge=0)]   # unit-agnostic, stored as given
PosId = Annotated[int, Field(ge=1)]

class SetInput(BaseModel):
    reps: Reps
    weight: Weight

class WorkoutExerciseInput(BaseModel):
    exercise_id: PosId
    sets: list[SetInput] = Field(default_factory=list)

class WorkoutCreate(BaseModel):
    exercises: Annotated[list[WorkoutExerciseInput], Field(min_length=1)]

class SetRead(BaseModel):
    id: int
    reps: int
    weight: float

    model_config = {"from_attributes": True}

class WorkoutExerciseRead(BaseModel):
    id: int
    exercise_id: int
    # null when the referenced exercise no longer exists
    exercise: ExerciseRead | None = None
    sets: list[SetRead]

    model_config = {"from_attributes": True}

class WorkoutRead(BaseModel):
    id: int
    date: str
    exercises: list[WorkoutExerciseRead]

    model_config = {"from_attributes": True}

class WorkoutVolume(BaseModel):
    workout_id: int
    date: str
    volume: float
    # exercise name -> heaviest weight lifted in this workout
    max_weight: dict[str, float]

class HistorySummary(BaseModel):
    workout_count: int
    total_volume: float
    best_volume: float
    average_volume: float
    workouts: list[WorkoutVolume]
