from fittrack.models.base import Base, TimestampMixin
from fittrack.models.user import User, UserType, Gender, ActivityLevel
from fittrack.models.session import Session
from fittrack.models.food import Food
from fittrack.models.exercise import Exercise
from fittrack.models.weight import WeightHistory, WeightSource
from fittrack.models.diet import Diet, DietType, Meal, MealType, MealFood
from fittrack.models.workout import Workout, Progress

__all__ = [
    "Base", "TimestampMixin",
    "User", "UserType", "Gender", "ActivityLevel",
    "Session",
    "Food",
    "Exercise",
    "WeightHistory", "WeightSource",
    "Diet", "DietType", "Meal", "MealType", "MealFood",
    "Workout", "Progress",
]
