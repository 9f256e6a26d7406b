from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String
from liftlog.db import Base

class Exercise(Base):
    __tablename__ = "exercises"
    __table_args__ = {"sqlite_autoincrement": True}
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    category: Mapped[str] = mapped_column(String, nullable=False)
