from fastapi import APIRouter, Depends, Response, status
from liftlog.errors import NotFoundError
from liftlog.facade import WorkoutTracker
from liftlog.deps.tracker import get_tracker
from liftlog.schemas.workout import HistorySummary, WorkoutCreate, WorkoutRead

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutRead])
def list_workouts(tracker: WorkoutTracker = Depends(get_tracker)):
    return tracker.list_workouts()

# declared before /{workout_id} so "summary" is not parsed as an id
@router.get("/summary", response_model=HistorySummary)
def history_summary(tracker: WorkoutTracker = Depends(get_tracker)):
    return tracker.history_summary()

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: int, tracker: WorkoutTracker = Depends(get_tracker)):
    workout = tracker.get_workout(workout_id)
    if workout is None:
        raise NotFoundError(f"workout {workout_id} not found")
    return workout

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def log_workout(payload: WorkoutCreate, tracker: WorkoutTracker = Depends(get_tracker)):
    return tracker.log_workout(payload.exercises)

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: int, tracker: WorkoutTracker = Depends(get_tracker)):
    if not tracker.delete_workout(workout_id):
        raise NotFoundError(f"workout {workout_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
