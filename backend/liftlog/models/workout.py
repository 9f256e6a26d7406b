from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, ForeignKey, String
from liftlog.db import Base

class Workout(Base):
    __tablename__ = "workouts"
    __table_args__ = {"sqlite_autoincrement": True}
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # ISO-8601, stamped server-side at write time
    date: Mapped[str] = mapped_column(String, nullable=False)


class WorkoutExercise(Base):
    __tablename__ = "workout_exercises"
    __table_args__ = {"sqlite_autoincrement": True}
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    workout_id: Mapped[int] = mapped_column(
        ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # No ondelete: exercise deletion removes these rows explicitly
    exercise_id: Mapped[int] = mapped_column(
        ForeignKey("exercises.id"), nullable=False, index=True
    )
