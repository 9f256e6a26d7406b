from fastapi import APIRouter, Depends, status
from liftlog.errors import NotFoundError
from liftlog.facade import WorkoutTracker
from liftlog.deps.tracker import get_tracker
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(tracker: WorkoutTracker = Depends(get_tracker)):
    return tracker.list_exercises()

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def add_exercise(payload: ExerciseCreate, tracker: WorkoutTracker = Depends(get_tracker)):
    return tracker.create_exercise(payload.name, payload.category)

@router.put("/{exercise_id}", response_model=ExerciseRead)
def update_exercise(exercise_id: int, payload: ExerciseUpdate, tracker: WorkoutTracker = Depends(get_tracker)):
    # NotFoundError is mapped to 404 by the app's exception handler
    return tracker.update_exercise(exercise_id, payload.name, payload.category)

@router.delete("/{exercise_id}", response_model=ExerciseRead)
def delete_exercise(exercise_id: int, tracker: WorkoutTracker = Depends(get_tracker)):
    deleted = tracker.delete_exercise(exercise_id)
    if deleted is None:
        raise NotFoundError(f"exercise {exercise_id} not found")
    return deleted
