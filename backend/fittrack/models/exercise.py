# backend/fittrack/models/exercise.py
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from fittrack.models.base import Base, TimestampMixin


class Exercise(Base, TimestampMixin):
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(300), nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(String(400))
    alternative: Mapped[str | None] = mapped_column(String(100))
    video: Mapped[str | None] = mapped_column(String(1000))
