# backend/fittrack/models/weight.py
import enum
from datetime import datetime
from sqlalchemy import String, Float, Enum, ForeignKey, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column
from fittrack.models.base import Base, utcnow


class WeightSource(str, enum.Enum):
    MANUAL = "MANUAL"
    PROGRESS = "PROGRESS"
    PROFILE_UPDATE = "PROFILE_UPDATE"


class WeightHistory(Base):
    __tablename__ = "weight_history"
    __table_args__ = (Index("weight_history_user_date_idx", "user_id", "date"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    source: Mapped[WeightSource] = mapped_column(Enum(WeightSource), nullable=False)
    notes: Mapped[str | None] = mapped_column(String(500))
