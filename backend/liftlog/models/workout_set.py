from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import CheckConstraint, Float, ForeignKey, Integer
from liftlog.db import Base

class WorkoutSet(Base):
    __tablename__ = "workout_sets"
    __table_args__ = (
        CheckConstraint("reps >= 0", name="ck_workout_sets_reps_non_negative"),
        CheckConstraint("weight >= 0", name="ck_workout_sets_weight_non_negative"),
        {"sqlite_autoincrement": True},
    )
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    workout_exercise_id: Mapped[int] = mapped_column(
        ForeignKey("workout_exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
