# backend/fittrack/models/diet.py
"""Diet plans, their meals and the foods that make up each meal."""
import enum
from datetime import datetime
from sqlalchemy import String, Text, Float, Integer, Boolean, Enum, ForeignKey, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column
from fittrack.models.base import Base, TimestampMixin, utcnow


class DietType(str, enum.Enum):
    WEIGHT_LOSS = "WEIGHT_LOSS"
    MUSCLE_GAIN = "MUSCLE_GAIN"
    MAINTENANCE = "MAINTENANCE"
    CUSTOM = "CUSTOM"


class MealType(str, enum.Enum):
    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    MORNING_SNACK = "MORNING_SNACK"
    AFTERNOON_SNACK = "AFTERNOON_SNACK"
    EVENING_SNACK = "EVENING_SNACK"


class Diet(Base, TimestampMixin):
    __tablename__ = "diets"
    __table_args__ = (Index("diets_active_idx", "user_id", "active"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    type: Mapped[DietType] = mapped_column(Enum(DietType), nullable=False)

    calorie_target: Mapped[int] = mapped_column(Integer, nullable=False)
    protein_target: Mapped[float | None] = mapped_column(Float)
    carb_target: Mapped[float | None] = mapped_column(Float)
    fat_target: Mapped[float | None] = mapped_column(Float)

    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=utcnow)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    active: Mapped[bool] = mapped_column(Boolean, default=True)


class Meal(Base):
    __tablename__ = "meals"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    diet_id: Mapped[int] = mapped_column(ForeignKey("diets.id"), nullable=False, index=True)
    type: Mapped[MealType] = mapped_column(Enum(MealType), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    target_calories: Mapped[int | None] = mapped_column(Integer)
    time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    duration: Mapped[int | None] = mapped_column(Integer)  # minutes
    notes: Mapped[str | None] = mapped_column(Text)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)


class MealFood(Base):
    __tablename__ = "meal_foods"
    __table_args__ = (Index("meal_foods_order_idx", "meal_id", "order"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    meal_id: Mapped[int] = mapped_column(ForeignKey("meals.id"), nullable=False, index=True)
    food_id: Mapped[int] = mapped_column(ForeignKey("foods.id"), nullable=False)
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[str] = mapped_column(String(20), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)
    order: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
