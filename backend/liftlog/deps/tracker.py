# liftlog/deps/tracker.py
from fastapi import Depends
from sqlalchemy.orm import Session

from liftlog.db import get_db
from liftlog.facade import WorkoutTracker

def get_tracker(db: Session = Depends(get_db)) -> WorkoutTracker:
    return WorkoutTracker(db)
